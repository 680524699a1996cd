# -*- coding: utf-8 -*-
"""Tolerant parsing of model output into nutrition / exercise estimates."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, Iterator, List, Optional

from ..goals.calculator import round_half_up

# NaN / Infinity become null instead of float("nan").
_DECODER = json.JSONDecoder(parse_constant=lambda _name: None)

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
_NUM_RE = re.compile(r"-?\d+(?:\.\d+)?")


def _sanitize_json_like(text: str) -> str:
    cleaned = text.replace("“", "\"").replace("”", "\"")
    return _TRAILING_COMMA_RE.sub(r"\1", cleaned)


def iter_json_objects(text: str) -> Iterator[Dict[str, Any]]:
    """Yield each top-level JSON object embedded in arbitrary text.

    Models sometimes wrap JSON with prose or emit more than one object.
    """
    idx = text.find("{")
    while idx != -1:
        try:
            parsed, end = _DECODER.raw_decode(text, idx)
        except ValueError:
            idx = text.find("{", idx + 1)
            continue
        if isinstance(parsed, dict):
            yield parsed
        idx = text.find("{", end)


def parse_model_output_json(content: str) -> Dict[str, Any]:
    cleaned = _FENCE_RE.sub("", content.strip())
    for attempt in (cleaned, _sanitize_json_like(cleaned)):
        for parsed in iter_json_objects(attempt):
            return parsed
    raise ValueError("Model output does not contain a JSON object")


def coerce_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _NUM_RE.search(value.replace(",", ""))
        return float(match.group(0)) if match else None
    return None


def _pick_num(raw: Dict[str, Any], keys: List[str]) -> Optional[float]:
    for k in keys:
        if k in raw:
            val = coerce_float(raw.get(k))
            if val is not None:
                return val
    return None


def _unwrap(parsed: Dict[str, Any], keys: List[str]) -> Dict[str, Any]:
    for k in keys:
        inner = parsed.get(k)
        if isinstance(inner, dict):
            return inner
    return parsed


def normalize_nutrition(parsed: Dict[str, Any]) -> Dict[str, float]:
    """Map loosely named nutrition keys onto calories/carbs/protein/fat."""
    raw = _unwrap(parsed, ["totals", "total", "nutrition"])
    calories = _pick_num(raw, ["calories", "calories_kcal", "kcal", "energy_kcal", "energy"])
    if calories is None:
        raise ValueError("Model output is missing calories")
    carbs = _pick_num(raw, ["carbs", "carbs_g", "carbohydrates", "carb"])
    protein = _pick_num(raw, ["protein", "protein_g"])
    fat = _pick_num(raw, ["fat", "fat_g", "lipid"])
    return {
        "calories": max(0.0, calories),
        "carbs": max(0.0, carbs or 0.0),
        "protein": max(0.0, protein or 0.0),
        "fat": max(0.0, fat or 0.0),
    }


def normalize_exercise(parsed: Dict[str, Any], fallback_activity: str) -> Dict[str, Any]:
    """Map loosely named exercise keys onto activity/duration/calories_burned.

    Duration and calories are rounded to whole numbers.
    """
    raw = _unwrap(parsed, ["exercise", "workout"])

    activity = None
    for k in ("activity", "name", "exercise", "type"):
        val = raw.get(k)
        if isinstance(val, str) and val.strip():
            activity = val.strip()
            break

    duration = _pick_num(raw, ["duration", "duration_minutes", "durationMinutes", "minutes"])
    burned = _pick_num(raw, ["caloriesBurned", "calories_burned", "calories", "kcal", "energy_kcal"])
    if burned is None:
        raise ValueError("Model output is missing caloriesBurned")

    return {
        "activity": activity or fallback_activity,
        "duration": int(round_half_up(max(0.0, duration or 0.0))),
        "calories_burned": round_half_up(max(0.0, burned)),
    }
