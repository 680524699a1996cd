# -*- coding: utf-8 -*-
"""Food — API endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from ..analysis import AnalysisError, GeminiAnalyzer, get_analyzer
from ..schema import IsoDate
from ..storage import EntryStore, get_store
from ..storage.base import today
from .models import AnalyzeFoodRequest, FoodEntry, FoodEntryCreate, NutritionEstimate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/food", tags=["Food"])


@router.post("/analyze", response_model=NutritionEstimate, summary="Estimate nutrition from a description (no storage)")
def analyze(request: AnalyzeFoodRequest, analyzer: GeminiAnalyzer = Depends(get_analyzer)):
    try:
        return analyzer.analyze_food(request.description)
    except ValueError as exc:
        logger.error("food analysis config/output error: %s", exc)
        raise HTTPException(status_code=500, detail=f"Analyzer config/output error: {exc}") from exc
    except AnalysisError as exc:
        logger.error("food analysis failed: %s", exc)
        raise HTTPException(status_code=502, detail=f"AI analysis failed: {exc}") from exc


@router.post("/entries", response_model=FoodEntry, summary="Create a food entry")
def create_entry(request: FoodEntryCreate, store: EntryStore = Depends(get_store)):
    try:
        return store.create_food_entry(request)
    except Exception as exc:
        logger.error("failed to save food entry: %s", exc, exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to save entry: {exc}") from exc


@router.get("/entries/today", response_model=List[FoodEntry], summary="Food entries for today")
def list_today(store: EntryStore = Depends(get_store)):
    return store.get_food_entries_by_date(today())


@router.get("/entries/{date}", response_model=List[FoodEntry], summary="Food entries for a date")
def list_by_date(
    date: IsoDate = Path(..., description="YYYY-MM-DD"),
    store: EntryStore = Depends(get_store),
):
    return store.get_food_entries_by_date(date)


@router.delete("/entries/{entry_id}", summary="Delete a food entry")
def delete_entry(entry_id: int, store: EntryStore = Depends(get_store)):
    if not store.delete_food_entry(entry_id):
        raise HTTPException(status_code=404, detail=f"Food entry {entry_id} not found")
    return {"success": True}
