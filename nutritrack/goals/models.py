# -*- coding: utf-8 -*-
"""Goals — Pydantic models."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..schema import ApiModel
from .calculator import ActivityLevel, CalculatedGoals, Profile

Gender = Literal["male", "female"]


class CalculateGoalsRequest(ApiModel):
    age: int = Field(..., ge=1, le=120)
    gender: Gender
    current_weight: float = Field(..., ge=1, le=500, description="kg")
    target_weight: float = Field(..., ge=1, le=500, description="kg")
    height: float = Field(..., ge=50, le=300, description="cm")
    activity_level: ActivityLevel
    timeframe: float = Field(..., ge=1, le=24, description="months")

    def to_profile(self) -> Profile:
        return Profile(
            age=self.age,
            gender=self.gender,
            current_weight=self.current_weight,
            target_weight=self.target_weight,
            height=self.height,
            activity_level=self.activity_level.value,
            timeframe=self.timeframe,
        )


class CalculatedGoalsResponse(ApiModel):
    calories: int
    carbs: int
    protein: int
    fat: int
    bmr: int
    tdee: int
    weight_change_per_week: float
    calorie_adjustment: int

    @classmethod
    def from_result(cls, goals: CalculatedGoals) -> "CalculatedGoalsResponse":
        return cls(
            calories=goals.calories,
            carbs=goals.carbs,
            protein=goals.protein,
            fat=goals.fat,
            bmr=goals.bmr,
            tdee=goals.tdee,
            weight_change_per_week=goals.weight_change_per_week,
            calorie_adjustment=goals.calorie_adjustment,
        )


class DailyGoals(ApiModel):
    calories: float = 2000
    carbs: float = 250
    protein: float = 120
    fat: float = 78


class UpdateGoalsRequest(ApiModel):
    calories: float = Field(..., ge=800, le=10000)
    carbs: float = Field(..., ge=20, le=1000)
    protein: float = Field(..., ge=20, le=500)
    fat: float = Field(..., ge=20, le=300)


class ActivityLevelInfo(ApiModel):
    value: ActivityLevel
    multiplier: float
    description: str
