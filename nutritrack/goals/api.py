# -*- coding: utf-8 -*-
"""Goals — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends

from ..storage import EntryStore, get_store
from .calculator import ACTIVITY_DESCRIPTIONS, ACTIVITY_MULTIPLIERS, ActivityLevel, calculate_goals
from .models import (
    ActivityLevelInfo,
    CalculatedGoalsResponse,
    CalculateGoalsRequest,
    DailyGoals,
    UpdateGoalsRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Goals"])


@router.post("/goals/calculate", response_model=CalculatedGoalsResponse, summary="Calculate personalised daily goals")
@router.post("/calculate-goals", response_model=CalculatedGoalsResponse, include_in_schema=False)
def calculate(request: CalculateGoalsRequest, store: EntryStore = Depends(get_store)):
    goals = calculate_goals(request.to_profile())
    store.update_daily_goals(
        DailyGoals(calories=goals.calories, carbs=goals.carbs, protein=goals.protein, fat=goals.fat)
    )
    logger.info(
        "calculated goals: calories=%s bmr=%s tdee=%s weekly_change=%s",
        goals.calories,
        goals.bmr,
        goals.tdee,
        goals.weight_change_per_week,
    )
    return CalculatedGoalsResponse.from_result(goals)


@router.get("/goals", response_model=DailyGoals, summary="Current daily goals")
def get_goals(store: EntryStore = Depends(get_store)):
    return store.get_daily_goals()


@router.put("/goals", response_model=DailyGoals, summary="Set daily goals manually")
def update_goals(request: UpdateGoalsRequest, store: EntryStore = Depends(get_store)):
    return store.update_daily_goals(DailyGoals(**request.model_dump()))


@router.get("/activity-levels", response_model=List[ActivityLevelInfo], summary="Activity levels and TDEE multipliers")
def activity_levels():
    return [
        ActivityLevelInfo(
            value=level,
            multiplier=ACTIVITY_MULTIPLIERS[level],
            description=ACTIVITY_DESCRIPTIONS[level],
        )
        for level in ActivityLevel
    ]
