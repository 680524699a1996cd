# -*- coding: utf-8 -*-
"""MET-based calorie burn estimates."""

from __future__ import annotations

from typing import Optional

from ..goals.calculator import round_half_up

# Common MET values (Compendium of Physical Activities).
EXERCISE_METS = {
    "walking": 3.5,
    "jogging": 7.0,
    "running": 10.0,
    "cycling": 8.0,
    "swimming": 8.0,
    "weightlifting": 6.0,
    "yoga": 3.0,
    "dancing": 4.5,
    "basketball": 8.0,
    "soccer": 7.0,
    "tennis": 7.0,
    "hiking": 6.0,
}


def lookup_met(activity: str) -> Optional[float]:
    key = activity.strip().lower().replace(" ", "")
    if key in EXERCISE_METS:
        return EXERCISE_METS[key]
    # "weight lifting" / "Running (6 mph)" style inputs
    for name, met in EXERCISE_METS.items():
        if key.startswith(name):
            return met
    return None


def calories_from_met(met: float, weight_kg: float, duration_minutes: float) -> int:
    """Calories = MET x kg x hours."""
    return int(round_half_up(met * weight_kg * (duration_minutes / 60)))
