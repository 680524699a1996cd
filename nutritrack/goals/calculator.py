# -*- coding: utf-8 -*-
"""
Daily calorie target and macro split from a biometric profile and a
weight-change goal:

- BMR via Mifflin-St Jeor
- TDEE = BMR x activity multiplier
- weekly weight change clamped into safe bounds
- calorie adjustment at 7700 kcal per kg of body mass
- sex-specific calorie floor
- protein by target weight, 28% fat, carbs as the remainder

Everything here is pure and synchronous; input ranges are enforced by the
HTTP layer before these functions are called.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    lightly_active = "lightly_active"
    moderately_active = "moderately_active"
    very_active = "very_active"
    extremely_active = "extremely_active"


ACTIVITY_MULTIPLIERS = {
    ActivityLevel.sedentary: 1.2,  # little or no exercise
    ActivityLevel.lightly_active: 1.375,  # light exercise 1-3 days/week
    ActivityLevel.moderately_active: 1.55,  # moderate exercise 3-5 days/week
    ActivityLevel.very_active: 1.725,  # hard exercise 6-7 days/week
    ActivityLevel.extremely_active: 1.9,  # very hard exercise, physical job
}

ACTIVITY_DESCRIPTIONS = {
    ActivityLevel.sedentary: "Little or no exercise (desk job)",
    ActivityLevel.lightly_active: "Light exercise 1-3 days/week",
    ActivityLevel.moderately_active: "Moderate exercise 3-5 days/week",
    ActivityLevel.very_active: "Hard exercise 6-7 days/week",
    ActivityLevel.extremely_active: "Very hard exercise + physical job",
}

WEEKS_PER_MONTH = 4.33
KCAL_PER_KG = 7700

# Safe weekly weight change (kg/week).
MIN_WEEKLY_LOSS = 0.25
MAX_WEEKLY_LOSS = 1.0
MIN_WEEKLY_GAIN = 0.25
MAX_WEEKLY_GAIN = 0.5

MIN_CALORIES = {"female": 1200, "male": 1500}

FAT_SHARE = 0.28
PROTEIN_PER_KG_LOSS = 2.0
PROTEIN_PER_KG_OTHER = 1.8
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


@dataclass(frozen=True)
class Profile:
    age: int
    gender: str  # male | female
    current_weight: float  # kg
    target_weight: float  # kg
    height: float  # cm
    activity_level: str
    timeframe: float  # months


@dataclass(frozen=True)
class CalculatedGoals:
    calories: int
    carbs: int
    protein: int
    fat: int
    bmr: int
    tdee: int
    weight_change_per_week: float
    calorie_adjustment: int


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves towards +inf (``round`` in Python rounds them to even)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def _round_int(value: float) -> int:
    return int(round_half_up(value))


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: str) -> float:
    """Mifflin-St Jeor basal metabolic rate (kcal/day)."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == "male" else base - 161


def activity_multiplier(activity_level: str) -> float:
    try:
        level = ActivityLevel(activity_level)
    except ValueError:
        # Unknown levels fall back to sedentary instead of failing.
        return ACTIVITY_MULTIPLIERS[ActivityLevel.sedentary]
    return ACTIVITY_MULTIPLIERS[level]


def calculate_tdee(bmr: float, activity_level: str) -> float:
    return bmr * activity_multiplier(activity_level)


def safe_weekly_change(current_weight: float, target_weight: float, timeframe_months: float) -> float:
    """
    Minimum effective change rate.

    The rate implied by the timeframe is clamped into the safe band for the
    direction of travel. A rate below the band minimum is raised to it, so
    any goal (including target == current, which counts as a gain) yields a
    non-zero weekly change.

    Returns:
        float: kg/week, negative for loss
    """
    total_change = target_weight - current_weight
    desired = total_change / (timeframe_months * WEEKS_PER_MONTH)
    magnitude = abs(desired)

    if total_change < 0:
        return -min(max(magnitude, MIN_WEEKLY_LOSS), MAX_WEEKLY_LOSS)
    return min(max(magnitude, MIN_WEEKLY_GAIN), MAX_WEEKLY_GAIN)


def calorie_adjustment(weekly_change_kg: float) -> int:
    return _round_int(weekly_change_kg * KCAL_PER_KG / 7)


def minimum_calories(gender: str) -> int:
    return MIN_CALORIES["female"] if gender == "female" else MIN_CALORIES["male"]


def calculate_macros(total_calories: int, target_weight: float, is_weight_loss: bool) -> dict:
    """Split a calorie total into carbs/protein/fat grams."""
    protein_per_kg = PROTEIN_PER_KG_LOSS if is_weight_loss else PROTEIN_PER_KG_OTHER
    protein_g = _round_int(target_weight * protein_per_kg)
    protein_kcal = protein_g * KCAL_PER_G_PROTEIN

    fat_kcal = total_calories * FAT_SHARE
    fat_g = _round_int(fat_kcal / KCAL_PER_G_FAT)

    remaining = max(total_calories - protein_kcal - fat_kcal, 0)
    carbs_g = _round_int(remaining / KCAL_PER_G_CARBS)

    return {"carbs": carbs_g, "protein": protein_g, "fat": fat_g}


def calculate_goals(profile: Profile) -> CalculatedGoals:
    bmr = calculate_bmr(profile.current_weight, profile.height, profile.age, profile.gender)
    tdee = calculate_tdee(bmr, profile.activity_level)

    weekly_change = safe_weekly_change(profile.current_weight, profile.target_weight, profile.timeframe)
    adjustment = calorie_adjustment(weekly_change)

    # The floor is applied after the adjustment; weekly change and adjustment
    # are reported as computed, not reconciled with the floored total.
    target_calories = _round_int(tdee + adjustment)
    final_calories = max(target_calories, minimum_calories(profile.gender))

    is_weight_loss = profile.target_weight < profile.current_weight
    macros = calculate_macros(final_calories, profile.target_weight, is_weight_loss)

    return CalculatedGoals(
        calories=final_calories,
        carbs=macros["carbs"],
        protein=macros["protein"],
        fat=macros["fat"],
        bmr=_round_int(bmr),
        tdee=_round_int(tdee),
        weight_change_per_week=round_half_up(weekly_change, 2),
        calorie_adjustment=adjustment,
    )
