# -*- coding: utf-8 -*-
"""Shared pydantic base for the JSON API (camelCase on the wire)."""

from __future__ import annotations

import datetime as dt
import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def check_calendar_date(value: str) -> str:
    """Reject anything but a real YYYY-MM-DD calendar day (no 2024-02-30)."""
    if not _DATE_RE.fullmatch(value):
        raise ValueError("date must use the YYYY-MM-DD format")
    try:
        dt.date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{value} is not a calendar date") from None
    return value


# Dates stay strings end to end; ISO order is calendar order.
IsoDate = Annotated[str, AfterValidator(check_calendar_date)]


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
