# -*- coding: utf-8 -*-
"""AI analysis of free-text meal and workout descriptions."""

from __future__ import annotations

from .gemini import AnalysisError, GeminiAnalyzer


def get_analyzer() -> GeminiAnalyzer:
    return GeminiAnalyzer()


__all__ = ["AnalysisError", "GeminiAnalyzer", "get_analyzer"]
