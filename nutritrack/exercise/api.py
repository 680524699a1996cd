# -*- coding: utf-8 -*-
"""Exercise domain — API endpoints."""

from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path

from ..analysis import AnalysisError, GeminiAnalyzer, get_analyzer
from ..config import settings
from ..schema import IsoDate
from ..storage import EntryStore, get_store
from ..storage.base import today
from .met import EXERCISE_METS, calories_from_met, lookup_met
from .models import (
    AnalyzeExerciseRequest,
    ExerciseEntry,
    ExerciseEntryCreate,
    ExerciseEstimate,
    MetEstimateRequest,
    MetEstimateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exercise", tags=["Exercise"])


def _profile_weight(store: EntryStore) -> float:
    profile = store.get_user_profile()
    return profile.current_weight if profile else settings.default_weight_kg


@router.post("/analyze", response_model=ExerciseEstimate, summary="Estimate duration and calorie burn from a description")
def analyze(
    request: AnalyzeExerciseRequest,
    store: EntryStore = Depends(get_store),
    analyzer: GeminiAnalyzer = Depends(get_analyzer),
):
    weight = _profile_weight(store)
    try:
        return analyzer.analyze_exercise(request.description, weight)
    except ValueError as exc:
        logger.error("exercise analysis config/output error: %s", exc)
        raise HTTPException(status_code=500, detail=f"Analyzer config/output error: {exc}") from exc
    except AnalysisError as exc:
        logger.error("exercise analysis failed: %s", exc)
        raise HTTPException(status_code=502, detail=f"AI analysis failed: {exc}") from exc


@router.get("/mets", response_model=Dict[str, float], summary="MET values for common activities")
def list_mets():
    return EXERCISE_METS


@router.post("/estimate", response_model=MetEstimateResponse, summary="MET-based calorie burn estimate")
def estimate(request: MetEstimateRequest, store: EntryStore = Depends(get_store)):
    met = lookup_met(request.activity)
    if met is None:
        raise HTTPException(status_code=404, detail=f"No MET value for activity: {request.activity}")
    weight = request.weight if request.weight is not None else _profile_weight(store)
    return MetEstimateResponse(
        activity=request.activity,
        duration=request.duration,
        calories_burned=calories_from_met(met, weight, request.duration),
        met=met,
        weight=weight,
    )


@router.post("/entries", response_model=ExerciseEntry, summary="Create an exercise entry")
def create_entry(request: ExerciseEntryCreate, store: EntryStore = Depends(get_store)):
    try:
        return store.create_exercise_entry(request)
    except Exception as exc:
        logger.error("failed to save exercise entry: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save entry: {exc}") from exc


@router.get("/entries/today", response_model=List[ExerciseEntry], summary="Exercise entries for today")
def list_today(store: EntryStore = Depends(get_store)):
    return store.get_exercise_entries_by_date(today())


@router.get("/entries/{date}", response_model=List[ExerciseEntry], summary="Exercise entries for a date")
def list_by_date(
    date: IsoDate = Path(..., description="YYYY-MM-DD"),
    store: EntryStore = Depends(get_store),
):
    return store.get_exercise_entries_by_date(date)


@router.delete("/entries/{entry_id}", summary="Delete an exercise entry")
def delete_entry(entry_id: int, store: EntryStore = Depends(get_store)):
    if not store.delete_exercise_entry(entry_id):
        raise HTTPException(status_code=404, detail=f"Exercise entry {entry_id} not found")
    return {"success": True}
