# -*- coding: utf-8 -*-

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from nutritrack.exercise.models import ExerciseEntryCreate
from nutritrack.food.models import FoodEntryCreate
from nutritrack.goals.models import DailyGoals
from nutritrack.profile.models import UserProfileIn
from nutritrack.storage import MemoryStore, SQLiteStore, create_store


def _food(date: str | None = None, calories: float = 250.0) -> FoodEntryCreate:
    return FoodEntryCreate(description="Greek yogurt", calories=calories, carbs=12, protein=18, fat=6, date=date)


def _exercise(date: str | None = None) -> ExerciseEntryCreate:
    return ExerciseEntryCreate(activity="Swimming", calories_burned=420, duration=40, date=date)


def _profile(**overrides) -> UserProfileIn:
    base = dict(
        age=52,
        gender="male",
        current_weight=88,
        target_weight=82,
        height=181,
        activity_level="very_active",
    )
    base.update(overrides)
    return UserProfileIn(**base)


class _StoreContract:
    """Behaviour shared by every EntryStore implementation."""

    def make_store(self):
        raise NotImplementedError

    def setUp(self) -> None:
        self.store = self.make_store()

    def test_ids_start_at_one_per_kind(self) -> None:
        self.assertEqual(self.store.create_food_entry(_food()).id, 1)
        self.assertEqual(self.store.create_food_entry(_food()).id, 2)
        self.assertEqual(self.store.create_exercise_entry(_exercise()).id, 1)

    def test_entry_fields_round_trip(self) -> None:
        created = self.store.create_food_entry(_food("2024-02-29", calories=312.5))
        [stored] = self.store.get_food_entries_by_date("2024-02-29")
        self.assertEqual(stored, created)
        self.assertEqual(stored.calories, 312.5)
        self.assertTrue(stored.timestamp.endswith("Z"))

    def test_query_by_date_and_range(self) -> None:
        for day in ("2024-01-01", "2024-01-02", "2024-01-02", "2024-01-05"):
            self.store.create_food_entry(_food(day))
        self.store.create_exercise_entry(_exercise("2024-01-02"))

        self.assertEqual(len(self.store.get_food_entries_by_date("2024-01-02")), 2)
        self.assertEqual(len(self.store.get_food_entries_by_date("2024-01-03")), 0)
        in_range = self.store.get_food_entries(start="2024-01-02", end="2024-01-05")
        self.assertEqual([e.date for e in in_range], ["2024-01-02", "2024-01-02", "2024-01-05"])
        self.assertEqual(len(self.store.get_food_entries()), 4)
        self.assertEqual(len(self.store.get_exercise_entries_by_date("2024-01-02")), 1)

    def test_delete(self) -> None:
        entry = self.store.create_exercise_entry(_exercise())
        self.assertTrue(self.store.delete_exercise_entry(entry.id))
        self.assertFalse(self.store.delete_exercise_entry(entry.id))
        self.assertFalse(self.store.delete_food_entry(99))
        self.assertEqual(self.store.get_exercise_entries(), [])

    def test_daily_goals(self) -> None:
        self.assertEqual(self.store.get_daily_goals(), DailyGoals(calories=2000, carbs=250, protein=120, fat=78))
        updated = self.store.update_daily_goals(DailyGoals(calories=2491, carbs=288, protein=160, fat=77))
        self.assertEqual(updated.calories, 2491)
        self.assertEqual(self.store.get_daily_goals(), updated)

    def test_profile_keeps_created_at(self) -> None:
        self.assertIsNone(self.store.get_user_profile())
        first = self.store.save_user_profile(_profile())
        self.assertEqual(first.timeframe, 6)
        second = self.store.save_user_profile(_profile(current_weight=86, timeframe=1.5))
        self.assertEqual(second.created_at, first.created_at)
        self.assertEqual(second.current_weight, 86)
        self.assertEqual(second.timeframe, 1.5)
        self.assertEqual(second.activity_level.value, "very_active")
        self.assertEqual(self.store.get_user_profile(), second)


class TestMemoryStore(_StoreContract, unittest.TestCase):
    def make_store(self):
        return MemoryStore()

    def test_returned_goals_are_copies(self) -> None:
        goals = self.store.get_daily_goals()
        goals.calories = 1
        self.assertEqual(self.store.get_daily_goals().calories, 2000)

    def test_returned_entries_are_copies(self) -> None:
        created = self.store.create_food_entry(_food("2024-01-01"))
        created.calories = 0
        [listed] = self.store.get_food_entries()
        listed.date = "1999-01-01"
        self.store.create_exercise_entry(_exercise("2024-01-01")).duration = 0

        [stored] = self.store.get_food_entries_by_date("2024-01-01")
        self.assertEqual(stored.calories, 250.0)
        self.assertEqual(self.store.get_exercise_entries()[0].duration, 40)


class TestSQLiteStore(_StoreContract, unittest.TestCase):
    def make_store(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.db_path = Path(self._tmp.name) / "nested" / "nutritrack.db"
        return SQLiteStore(self.db_path)

    def test_data_survives_reopen(self) -> None:
        self.store.create_food_entry(_food("2024-01-01"))
        self.store.update_daily_goals(DailyGoals(calories=1900, carbs=200, protein=140, fat=60))
        self.store.save_user_profile(_profile())

        reopened = SQLiteStore(self.db_path)
        self.assertEqual(len(reopened.get_food_entries_by_date("2024-01-01")), 1)
        self.assertEqual(reopened.get_daily_goals().calories, 1900)
        self.assertEqual(reopened.get_user_profile().age, 52)
        self.assertEqual(reopened.create_food_entry(_food()).id, 2)


class TestCreateStore(unittest.TestCase):
    def test_backends(self) -> None:
        self.assertIsInstance(create_store("memory", Path("unused.db")), MemoryStore)
        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsInstance(create_store("sqlite", Path(tmp) / "x.db"), SQLiteStore)
        with self.assertRaises(ValueError):
            create_store("redis", Path("unused.db"))


if __name__ == "__main__":
    unittest.main()
