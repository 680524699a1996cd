# -*- coding: utf-8 -*-
"""NutriTrack — nutrition and exercise tracking API."""

__version__ = "1.0.0"
