# -*- coding: utf-8 -*-
"""In-process entry store (lost on restart)."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..exercise.models import ExerciseEntry, ExerciseEntryCreate
from ..food.models import FoodEntry, FoodEntryCreate
from ..goals.models import DailyGoals
from ..profile.models import UserProfile, UserProfileIn
from .base import EntryStore, in_range, iso_now, today


class MemoryStore(EntryStore):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._food: Dict[int, FoodEntry] = {}
        self._exercise: Dict[int, ExerciseEntry] = {}
        self._next_food_id = 1
        self._next_exercise_id = 1
        self._goals = DailyGoals()
        self._profile: Optional[UserProfile] = None

    def create_food_entry(self, entry: FoodEntryCreate) -> FoodEntry:
        with self._lock:
            record = FoodEntry(
                id=self._next_food_id,
                description=entry.description,
                calories=entry.calories,
                carbs=entry.carbs,
                protein=entry.protein,
                fat=entry.fat,
                timestamp=iso_now(),
                date=entry.date or today(),
            )
            self._food[record.id] = record
            self._next_food_id += 1
        return record.model_copy()

    def get_food_entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[FoodEntry]:
        with self._lock:
            entries = list(self._food.values())
        return [e.model_copy() for e in entries if in_range(e.date, start, end)]

    def delete_food_entry(self, entry_id: int) -> bool:
        with self._lock:
            return self._food.pop(entry_id, None) is not None

    def create_exercise_entry(self, entry: ExerciseEntryCreate) -> ExerciseEntry:
        with self._lock:
            record = ExerciseEntry(
                id=self._next_exercise_id,
                activity=entry.activity,
                calories_burned=entry.calories_burned,
                duration=entry.duration,
                timestamp=iso_now(),
                date=entry.date or today(),
            )
            self._exercise[record.id] = record
            self._next_exercise_id += 1
        return record.model_copy()

    def get_exercise_entries(self, start: Optional[str] = None, end: Optional[str] = None) -> List[ExerciseEntry]:
        with self._lock:
            entries = list(self._exercise.values())
        return [e.model_copy() for e in entries if in_range(e.date, start, end)]

    def delete_exercise_entry(self, entry_id: int) -> bool:
        with self._lock:
            return self._exercise.pop(entry_id, None) is not None

    def get_daily_goals(self) -> DailyGoals:
        return self._goals.model_copy()

    def update_daily_goals(self, goals: DailyGoals) -> DailyGoals:
        with self._lock:
            self._goals = goals.model_copy()
        return self.get_daily_goals()

    def get_user_profile(self) -> Optional[UserProfile]:
        return self._profile.model_copy() if self._profile else None

    def save_user_profile(self, profile: UserProfileIn) -> UserProfile:
        now = iso_now()
        with self._lock:
            created_at = self._profile.created_at if self._profile else now
            self._profile = UserProfile(**profile.model_dump(), created_at=created_at, updated_at=now)
            return self._profile.model_copy()
