# -*- coding: utf-8 -*-
"""Nutrition / exercise estimation via the Gemini generateContent REST API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..exercise.models import ExerciseEstimate
from ..food.models import NutritionEstimate
from .parsing import normalize_exercise, normalize_nutrition, parse_model_output_json

logger = logging.getLogger(__name__)


class AnalysisError(RuntimeError):
    """The upstream model call failed or returned no usable content."""


@dataclass(frozen=True)
class GeminiSettings:
    api_key: Optional[str]
    base_url: str
    model: str
    timeout: float


def resolve_gemini_settings() -> GeminiSettings:
    return GeminiSettings(
        api_key=settings.gemini_api_key,
        base_url=settings.gemini_base_url.rstrip("/"),
        model=settings.gemini_model,
        timeout=settings.gemini_timeout,
    )


FOOD_SYSTEM_PROMPT = """You are a nutrition expert. Analyze the food description and provide accurate nutritional information.

Please provide the total nutritional values for the described food in JSON format with the following structure:
{
  "calories": number,
  "carbs": number,
  "protein": number,
  "fat": number
}

Values should be:
- calories: total calories as a number
- carbs: carbohydrates in grams as a number
- protein: protein in grams as a number
- fat: fat in grams as a number

Be as accurate as possible based on standard nutritional data for the foods described."""

FOOD_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "calories": {"type": "NUMBER"},
        "carbs": {"type": "NUMBER"},
        "protein": {"type": "NUMBER"},
        "fat": {"type": "NUMBER"},
    },
    "required": ["calories", "carbs", "protein", "fat"],
}

EXERCISE_SYSTEM_PROMPT = """You are a fitness expert who analyzes exercise descriptions and determines both duration and calories burned.

Given an exercise description and user's weight in kg, determine:
1. The most likely duration for this exercise session (in minutes)
2. Calculate calories burned using standard METs values

Use standard METs (Metabolic Equivalent of Task) values for accurate calculations:
- Formula: Calories = METs x weight(kg) x duration(hours)

Estimate realistic duration based on the type of exercise, the intensity
mentioned in the description, and common workout patterns.

Respond with JSON in this exact format:
{
  "activity": "brief descriptive name of the activity",
  "duration": number_in_minutes,
  "caloriesBurned": number
}"""

EXERCISE_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "activity": {"type": "STRING"},
        "duration": {"type": "NUMBER"},
        "caloriesBurned": {"type": "NUMBER"},
    },
    "required": ["activity", "duration", "caloriesBurned"],
}


def extract_text_from_response(data: object) -> str:
    """Concatenate text parts of the first candidate."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, dict):
        return ""
    content = first.get("content")
    if not isinstance(content, dict):
        return ""
    parts = content.get("parts")
    if not isinstance(parts, list):
        return ""
    out: list[str] = []
    for part in parts:
        if not isinstance(part, dict) or part.get("thought"):
            continue
        text = part.get("text")
        if isinstance(text, str) and text:
            out.append(text)
    return "".join(out)


def extract_error_from_response(data: object) -> str | None:
    """Human-readable error from a Gemini error body or a blocked prompt."""
    if not isinstance(data, dict):
        return None

    err = data.get("error")
    if isinstance(err, dict):
        message = err.get("message")
        if isinstance(message, str) and message.strip():
            status = err.get("status") or "GeminiError"
            code = err.get("code")
            prefix = f"{status} ({code})" if isinstance(code, int) else str(status)
            return f"{prefix}: {message.strip()}"

    feedback = data.get("promptFeedback")
    if isinstance(feedback, dict) and feedback.get("blockReason") and not data.get("candidates"):
        return f"Prompt blocked: {feedback['blockReason']}"

    return None


class GeminiAnalyzer:
    """Estimates nutrition for meals and calorie burn for workouts."""

    def __init__(
        self,
        cfg: GeminiSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.cfg = cfg or resolve_gemini_settings()
        self._transport = transport

    @property
    def model(self) -> str:
        return self.cfg.model

    def _generate(self, system_prompt: str, user_text: str, schema: Dict[str, Any]) -> str:
        if not self.cfg.api_key:
            raise ValueError("GEMINI_API_KEY is not configured")

        url = f"{self.cfg.base_url}/models/{self.cfg.model}:generateContent"
        payload = {
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": [{"role": "user", "parts": [{"text": user_text}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.cfg.api_key,
        }

        try:
            with httpx.Client(timeout=self.cfg.timeout, transport=self._transport) as client:
                resp = client.post(url, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            raise AnalysisError(f"Gemini request failed: {exc}") from exc

        try:
            data = resp.json()
        except json.JSONDecodeError:
            snippet = (resp.text or "").replace("\n", " ").strip()[:200]
            raise AnalysisError(f"Gemini returned non-JSON response ({resp.status_code}): {snippet}")

        error = extract_error_from_response(data)
        if error:
            raise AnalysisError(error)
        if resp.status_code >= 400:
            raise AnalysisError(f"Gemini returned HTTP {resp.status_code}")

        text = extract_text_from_response(data)
        if not text.strip():
            raise AnalysisError("Empty response from Gemini")
        return text

    def _parse(self, text: str) -> Dict[str, Any]:
        try:
            return parse_model_output_json(text)
        except ValueError:
            logger.warning("model output parse failed: %s", text[:200], exc_info=True)
            raise

    def analyze_food(self, description: str) -> NutritionEstimate:
        text = self._generate(FOOD_SYSTEM_PROMPT, description, FOOD_RESPONSE_SCHEMA)
        return NutritionEstimate(**normalize_nutrition(self._parse(text)))

    def analyze_exercise(self, description: str, weight_kg: float) -> ExerciseEstimate:
        user_text = (
            f"Exercise: {description}\n"
            f"User weight: {weight_kg:g} kg\n\n"
            "Analyze this exercise, estimate realistic duration, and calculate calories burned."
        )
        text = self._generate(EXERCISE_SYSTEM_PROMPT, user_text, EXERCISE_RESPONSE_SCHEMA)
        return ExerciseEstimate(**normalize_exercise(self._parse(text), fallback_activity=description))
