# -*- coding: utf-8 -*-
"""Entry store interface shared by the storage back ends."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from ..exercise.models import ExerciseEntry, ExerciseEntryCreate
from ..food.models import FoodEntry, FoodEntryCreate
from ..goals.models import DailyGoals
from ..profile.models import UserProfile, UserProfileIn


def iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def shift_days(day: str, days: int) -> str:
    return (date.fromisoformat(day) + timedelta(days=days)).isoformat()


def in_range(day: str, start: Optional[str], end: Optional[str]) -> bool:
    return (start or "0000-01-01") <= day <= (end or "9999-12-31")


class EntryStore:
    """Food/exercise entries keyed by date, plus the daily goals and the user profile.

    Entry ids are integers handed out per entry kind, starting at 1.
    """

    # Food entries
    def create_food_entry(self, entry: FoodEntryCreate) -> FoodEntry:
        raise NotImplementedError

    def get_food_entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[FoodEntry]:
        raise NotImplementedError

    def delete_food_entry(self, entry_id: int) -> bool:
        raise NotImplementedError

    # Exercise entries
    def create_exercise_entry(self, entry: ExerciseEntryCreate) -> ExerciseEntry:
        raise NotImplementedError

    def get_exercise_entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[ExerciseEntry]:
        raise NotImplementedError

    def delete_exercise_entry(self, entry_id: int) -> bool:
        raise NotImplementedError

    # Daily goals
    def get_daily_goals(self) -> DailyGoals:
        raise NotImplementedError

    def update_daily_goals(self, goals: DailyGoals) -> DailyGoals:
        raise NotImplementedError

    # User profile
    def get_user_profile(self) -> Optional[UserProfile]:
        raise NotImplementedError

    def save_user_profile(self, profile: UserProfileIn) -> UserProfile:
        raise NotImplementedError

    def get_food_entries_by_date(self, date: str) -> List[FoodEntry]:
        return self.get_food_entries(start=date, end=date)

    def get_exercise_entries_by_date(self, date: str) -> List[ExerciseEntry]:
        return self.get_exercise_entries(start=date, end=date)
