# -*- coding: utf-8 -*-
"""Summary aggregation over the entry store."""

from __future__ import annotations

from typing import Dict, List

from ..food.models import FoodEntry, NutritionEstimate
from ..storage import EntryStore
from ..storage.base import iso_now
from .models import DailySummary, DateActivity, ExportData, Remaining


def compute_totals(entries: List[FoodEntry]) -> NutritionEstimate:
    calories = 0.0
    carbs = 0.0
    protein = 0.0
    fat = 0.0
    for entry in entries:
        calories += entry.calories
        carbs += entry.carbs
        protein += entry.protein
        fat += entry.fat
    return NutritionEstimate(
        calories=round(calories, 1),
        carbs=round(carbs, 1),
        protein=round(protein, 1),
        fat=round(fat, 1),
    )


def get_daily_summary(store: EntryStore, date: str) -> DailySummary:
    food = store.get_food_entries_by_date(date)
    exercise = store.get_exercise_entries_by_date(date)
    goals = store.get_daily_goals()

    consumed = compute_totals(food)
    burned = round(sum(e.calories_burned for e in exercise), 1)

    return DailySummary(
        date=date,
        goals=goals,
        consumed=consumed,
        calories_burned=burned,
        net_calories=round(consumed.calories - burned, 1),
        remaining=Remaining(
            calories=round(goals.calories - consumed.calories + burned, 1),
            carbs=round(goals.carbs - consumed.carbs, 1),
            protein=round(goals.protein - consumed.protein, 1),
            fat=round(goals.fat - consumed.fat, 1),
        ),
        food_entry_count=len(food),
        exercise_entry_count=len(exercise),
        food_entries=food,
        exercise_entries=exercise,
    )


def get_date_range(store: EntryStore, start: str, end: str) -> List[DateActivity]:
    """Dates in [start, end] that have at least one entry, ascending."""
    per_day: Dict[str, DateActivity] = {}

    for entry in store.get_food_entries(start=start, end=end):
        day = per_day.setdefault(entry.date, DateActivity(date=entry.date))
        day.food_count += 1
        day.calories_consumed += entry.calories

    for entry in store.get_exercise_entries(start=start, end=end):
        day = per_day.setdefault(entry.date, DateActivity(date=entry.date))
        day.exercise_count += 1
        day.calories_burned += entry.calories_burned

    days: List[DateActivity] = []
    for key in sorted(per_day.keys()):
        day = per_day[key]
        day.calories_consumed = round(day.calories_consumed, 1)
        day.calories_burned = round(day.calories_burned, 1)
        days.append(day)
    return days


def export_data(store: EntryStore) -> ExportData:
    return ExportData(
        food_entries=store.get_food_entries(),
        exercise_entries=store.get_exercise_entries(),
        daily_goals=store.get_daily_goals(),
        user_profile=store.get_user_profile(),
        export_date=iso_now(),
    )
