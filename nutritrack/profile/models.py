# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from pydantic import Field

from ..goals.calculator import ActivityLevel
from ..goals.models import Gender
from ..schema import ApiModel


class UserProfileIn(ApiModel):
    age: int = Field(..., ge=1, le=120)
    gender: Gender
    current_weight: float = Field(..., ge=1, le=500, description="kg")
    target_weight: float = Field(..., ge=1, le=500, description="kg")
    height: float = Field(..., ge=50, le=300, description="cm")
    activity_level: ActivityLevel
    timeframe: float = Field(6, ge=1, le=24, description="months")


class UserProfile(UserProfileIn):
    created_at: str
    updated_at: str
