# -*- coding: utf-8 -*-
"""Profile — API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ..storage import EntryStore, get_store
from .models import UserProfile, UserProfileIn

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Optional[UserProfile], summary="Stored user profile (null when unset)")
def get_profile(store: EntryStore = Depends(get_store)):
    return store.get_user_profile()


@router.post("", response_model=UserProfile, summary="Create or update the user profile")
def save_profile(request: UserProfileIn, store: EntryStore = Depends(get_store)):
    return store.save_user_profile(request)
