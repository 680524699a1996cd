# -*- coding: utf-8 -*-
"""Exercise domain — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..schema import ApiModel, IsoDate


class ExerciseEstimate(ApiModel):
    activity: str
    duration: int = Field(0, ge=0, description="minutes")
    calories_burned: float = Field(0.0, ge=0)


class AnalyzeExerciseRequest(ApiModel):
    description: str = Field(..., min_length=1, description="Free-text workout description")


class MetEstimateRequest(ApiModel):
    activity: str = Field(..., min_length=1)
    duration: int = Field(..., ge=1, le=1440, description="minutes")
    weight: Optional[float] = Field(None, ge=1, le=500, description="kg, defaults to profile weight")


class MetEstimateResponse(ExerciseEstimate):
    met: float
    weight: float


class ExerciseEntryCreate(ApiModel):
    activity: str = Field(..., min_length=1)
    calories_burned: float = Field(..., ge=0)
    duration: int = Field(..., ge=0, description="minutes")
    date: Optional[IsoDate] = Field(None, description="YYYY-MM-DD, defaults to today")


class ExerciseEntry(ApiModel):
    id: int
    activity: str
    calories_burned: float
    duration: int
    timestamp: str
    date: str
