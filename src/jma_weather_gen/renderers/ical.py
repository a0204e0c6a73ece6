"""Render calendar events as an iCalendar (RFC 5545) document.

One all-day VEVENT per event, in input order, wrapped in a VCALENDAR with
fixed product and calendar metadata.  Every line ends with CRLF except the
final ``END:VCALENDAR``.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from jma_weather_gen.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jma_weather_gen.schemas import CalendarEvent

PRODID = "-//JMA Weather Gen//EN"
CALENDAR_NAME = "JMA Forecast"
CALENDAR_TIMEZONE = "Asia/Tokyo"
CRLF = "\r\n"
DTSTAMP_FORMAT = "%Y%m%dT%H%M%SZ"


def escape_text(value: str) -> str:
    """Escape a TEXT property value so it stays on one content line."""
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
        .replace("\r", "\\n")
    )


def format_dtstamp(moment: datetime) -> str:
    """UTC timestamp in iCalendar basic format, e.g. ``20231027T080000Z``."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.strftime(DTSTAMP_FORMAT)


def render_calendar(events: Sequence[CalendarEvent], *, now: datetime | None = None) -> str:
    """
    Render events into a single calendar document.

    Args:
        events: Events in the order they should appear.
        now: Generation time for DTSTAMP (defaults to the current UTC time).
            Captured once and shared by every event.

    Returns:
        The document text with CRLF line endings.
    """
    dtstamp = format_dtstamp(now or datetime.now(UTC))
    rows = [
        {
            "uid": str(uuid.uuid4()),
            "dtstart": event.date.strftime("%Y%m%d"),
            "summary": escape_text(event.summary),
            "description": escape_text(event.description),
        }
        for event in events
    ]

    text = render_template(
        "calendar.ics.j2",
        prodid=PRODID,
        calendar_name=CALENDAR_NAME,
        timezone=CALENDAR_TIMEZONE,
        dtstamp=dtstamp,
        events=rows,
    )
    return CRLF.join(text.split("\n"))
