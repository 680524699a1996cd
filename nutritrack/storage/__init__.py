# -*- coding: utf-8 -*-
"""Entry storage back ends and the FastAPI dependency that resolves them."""

from __future__ import annotations

from pathlib import Path

from fastapi import Request

from .base import EntryStore
from .memory import MemoryStore
from .sqlite import SQLiteStore


def create_store(backend: str, db_path: Path) -> EntryStore:
    if backend == "memory":
        return MemoryStore()
    if backend == "sqlite":
        return SQLiteStore(db_path)
    raise ValueError(f"Unknown storage backend: {backend!r} (expected 'memory' or 'sqlite')")


def get_store(request: Request) -> EntryStore:
    return request.app.state.store


__all__ = ["EntryStore", "MemoryStore", "SQLiteStore", "create_store", "get_store"]
