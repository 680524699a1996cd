# -*- coding: utf-8 -*-
"""Food — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..schema import ApiModel, IsoDate


class NutritionEstimate(ApiModel):
    calories: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)


class AnalyzeFoodRequest(ApiModel):
    description: str = Field(..., min_length=1, description="Free-text meal description")


class FoodEntryCreate(ApiModel):
    description: str = Field(..., min_length=1)
    calories: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)
    date: Optional[IsoDate] = Field(None, description="YYYY-MM-DD, defaults to today")


class FoodEntry(ApiModel):
    id: int
    description: str
    calories: float
    carbs: float
    protein: float
    fat: float
    timestamp: str
    date: str
