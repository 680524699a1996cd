# -*- coding: utf-8 -*-
"""Summary — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..exercise.models import ExerciseEntry
from ..food.models import FoodEntry, NutritionEstimate
from ..goals.models import DailyGoals
from ..profile.models import UserProfile
from ..schema import ApiModel


class Remaining(ApiModel):
    """Goal minus intake; calories also credit exercise. May be negative."""

    calories: float
    carbs: float
    protein: float
    fat: float


class DailySummary(ApiModel):
    date: str = Field(..., description="YYYY-MM-DD")
    goals: DailyGoals
    consumed: NutritionEstimate
    calories_burned: float = Field(0.0, ge=0)
    net_calories: float
    remaining: Remaining
    food_entry_count: int = Field(0, ge=0)
    exercise_entry_count: int = Field(0, ge=0)
    food_entries: List[FoodEntry] = Field(default_factory=list)
    exercise_entries: List[ExerciseEntry] = Field(default_factory=list)


class DateActivity(ApiModel):
    date: str = Field(..., description="YYYY-MM-DD")
    food_count: int = Field(0, ge=0)
    exercise_count: int = Field(0, ge=0)
    calories_consumed: float = Field(0.0, ge=0)
    calories_burned: float = Field(0.0, ge=0)


class ExportData(ApiModel):
    food_entries: List[FoodEntry]
    exercise_entries: List[ExerciseEntry]
    daily_goals: DailyGoals
    user_profile: Optional[UserProfile] = None
    export_date: str
