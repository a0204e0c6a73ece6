"""
Domain models shared between analysis and renderers.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class CalendarEvent(BaseModel):
    """One all-day calendar entry: the forecast for one city on one day."""

    model_config = ConfigDict(frozen=True)

    date: date
    summary: str = Field(..., description="Single-line headline")
    description: str = Field(..., description="Multi-line forecast detail")
