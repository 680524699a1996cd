# -*- coding: utf-8 -*-
"""
NutriTrack API

Food/exercise logging, AI-assisted nutrition and calorie-burn estimates, and
personalised calorie/macro goals.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .exercise.api import router as exercise_router
from .food.api import router as food_router
from .goals.api import router as goals_router
from .profile.api import router as profile_router
from .storage import create_store
from .summary.api import router as summary_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="NutriTrack",
    description="Nutrition and exercise tracking with AI-assisted estimates and personalised goals",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.store = create_store(settings.storage_backend, settings.db_path)


def _validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors: List[Dict[str, Any]] = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        errors.append({"field": ".".join(loc) or "body", "message": err.get("msg", "invalid value")})
    return errors


@app.exception_handler(RequestValidationError)
async def _request_validation_error(request: Request, exc: RequestValidationError):
    errors = _validation_errors(exc)
    logger.info("rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"message": "Invalid request", "errors": errors})


app.include_router(goals_router)
app.include_router(profile_router)
app.include_router(food_router)
app.include_router(exercise_router)
app.include_router(summary_router)


@app.get("/api/health")
def health_check():
    return {"ok": True, "storage": settings.storage_backend}


@app.get("/", include_in_schema=False)
def root():
    return {"message": "NutriTrack API", "docs": "/api/docs"}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        port = int(settings.port_raw)
    except ValueError:
        port = 8000

    logger.info("starting NutriTrack on %s:%s (storage=%s)", settings.host, port, settings.storage_backend)
    uvicorn.run("nutritrack.api:app", host=settings.host, port=port, reload=False)
