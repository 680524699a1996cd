# -*- coding: utf-8 -*-
"""Summary — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from fastapi.exceptions import RequestValidationError

from ..schema import IsoDate
from ..storage import EntryStore, get_store
from ..storage.base import shift_days, today
from .models import DailySummary, DateActivity, ExportData
from .service import export_data, get_daily_summary, get_date_range

router = APIRouter(prefix="/api", tags=["Summary"])

DEFAULT_RANGE_DAYS = 30


@router.get("/daily-summary/{date}", response_model=DailySummary, summary="Intake, burn and remaining budget for a date")
def daily_summary(
    date: IsoDate = Path(..., description="YYYY-MM-DD"),
    store: EntryStore = Depends(get_store),
):
    return get_daily_summary(store, date)


@router.get("/dates", response_model=List[DateActivity], summary="Dates with entries in a range")
def dates(
    start: Optional[IsoDate] = Query(default=None, description="YYYY-MM-DD, defaults to 30 days before end"),
    end: Optional[IsoDate] = Query(default=None, description="YYYY-MM-DD, defaults to today"),
    store: EntryStore = Depends(get_store),
):
    end_date = end or today()
    start_date = start or shift_days(end_date, -DEFAULT_RANGE_DAYS)
    if start_date > end_date:
        raise RequestValidationError(
            [
                {
                    "type": "value_error",
                    "loc": ("query", "start"),
                    "msg": "start must not be after end",
                    "input": start_date,
                }
            ]
        )
    return get_date_range(store, start_date, end_date)


@router.get("/export", response_model=ExportData, summary="Export all stored data")
def export(store: EntryStore = Depends(get_store)):
    return export_data(store)
