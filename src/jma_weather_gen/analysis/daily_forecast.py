"""Merge JMA forecast time series into one record per calendar day.

A forecast response holds several sections that overlap in time: the
short-range text forecast, short-range precipitation probabilities, the
weekly coded forecast, and the weekly min/max temperatures.  Sections are
folded, in order, into a date-keyed accumulator with per-field precedence:

  - ``weather``: first writer wins (``weathers`` text, else code lookup).
  - ``pop``: highest probability seen wins.
  - ``min`` / ``max``: first non-empty value wins.

The completed records become date-sorted calendar events.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from jma_weather_gen.datasources.jma.client import SOURCE_NAME
from jma_weather_gen.datasources.jma.models import ForecastReport, ForecastSection
from jma_weather_gen.datasources.jma.weather_codes import describe_weather_code
from jma_weather_gen.schemas import CalendarEvent

logger = logging.getLogger(__name__)

IDEOGRAPHIC_SPACE = "\u3000"
NO_WEATHER = "no data"
NO_TEMP = "-"
NO_POP = "---"


class DateParseError(ValueError):
    """A forecast timestamp does not contain a usable calendar date."""


@dataclass
class DayRecord:
    """Accumulated forecast for one calendar day.

    ``date`` is fixed at construction and is the record's key in the
    accumulator.  Every other field starts unset.  Once set, only ``pop``
    may change again, and only upward.
    """

    date: date
    weather: str | None = None
    pop: int | None = None
    min: str | None = None
    max: str | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "date" and "date" in self.__dict__:
            raise AttributeError("DayRecord.date cannot be reassigned")
        super().__setattr__(name, value)

    def set_weather(self, text: str | None) -> None:
        if text is not None and self.weather is None:
            self.weather = text

    def raise_pop(self, value: int) -> None:
        self.pop = max(self.pop or 0, value)

    def set_min(self, value: str | None) -> None:
        if value and self.min is None:
            self.min = value

    def set_max(self, value: str | None) -> None:
        if value and self.max is None:
            self.max = value


DayRecords = dict[date, DayRecord]


def extract_date(timestamp: str) -> date:
    """Calendar date of an ISO-8601 timestamp, in the timestamp's own offset.

    ``2023-10-27T17:00:00+09:00`` → ``date(2023, 10, 27)``.  Falls back to the
    first 10 characters as ``YYYY-MM-DD`` when full parsing fails.

    Raises:
        DateParseError: If neither form yields a valid date.
    """
    try:
        return datetime.fromisoformat(timestamp).date()
    except (TypeError, ValueError):
        pass
    try:
        return date.fromisoformat(timestamp[:10])
    except (TypeError, ValueError) as e:
        msg = f"Unparseable forecast timestamp: {timestamp!r}"
        raise DateParseError(msg) from e


def _at(values: Sequence[str | None], i: int) -> str | None:
    return values[i] if i < len(values) else None


def _parse_pop(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def merge_section(accumulator: DayRecords, section: Any) -> DayRecords:
    """Fold one ``timeSeries`` section into the date-keyed accumulator.

    Sections without list-typed ``timeDefines`` and a non-empty ``areas``,
    or whose first area has the wrong shape, leave the accumulator
    untouched.  Only the first area is validated; later entries are never
    read.  Field presence is decided once per section: a
    section with ``weathers`` never falls back to ``weatherCodes``, even at
    indexes where its text is missing.

    Args:
        accumulator: Records built so far, updated in place.
        section: Raw section dict or an already validated ``ForecastSection``.

    Returns:
        The accumulator.

    Raises:
        DateParseError: If a timestamp in the section has no usable date.
    """
    if not isinstance(section, ForecastSection):
        section = ForecastSection.from_raw(section)
    if section is None:
        return accumulator
    area = section.primary_area
    if area is None:
        return accumulator

    # None means the series is absent from this section
    weathers = area.weathers
    codes = area.weather_codes
    pops = area.pops
    temps_min = area.temps_min
    temps_max = area.temps_max

    for i, timestamp in enumerate(section.time_defines):
        day = extract_date(timestamp)
        record = accumulator.get(day) or DayRecord(date=day)

        if weathers is not None:
            text = _at(weathers, i)
            if text is not None:
                record.set_weather(text.replace(IDEOGRAPHIC_SPACE, " "))
        elif codes is not None:
            code = _at(codes, i)
            if code is not None:
                record.set_weather(describe_weather_code(code))

        if pops is not None:
            pop = _parse_pop(_at(pops, i))
            if pop is not None:
                record.raise_pop(pop)

        if temps_min is not None:
            record.set_min(_at(temps_min, i))
        if temps_max is not None:
            record.set_max(_at(temps_max, i))

        accumulator[day] = record

    return accumulator


def merge_report(accumulator: DayRecords, report: Any) -> DayRecords:
    """Fold every section of one report into the accumulator.

    All-or-nothing: if any timestamp in the report is unparseable, the
    report contributes nothing and the accumulator is returned unchanged.
    """
    parsed = ForecastReport.from_raw(report)
    if parsed is None:
        return accumulator

    staged = copy.deepcopy(accumulator)
    try:
        for section in parsed.sections():
            merge_section(staged, section)
    except DateParseError as e:
        logger.warning("Skipping report from %s: %s", parsed.publishing_office or "unknown", e)
        return accumulator
    return staged


def format_event(city_name: str, record: DayRecord) -> CalendarEvent:
    """Build the calendar event for one completed day."""
    weather = record.weather or NO_WEATHER
    high = record.max or NO_TEMP
    low = record.min or NO_TEMP
    pop = f"{record.pop}%" if record.pop is not None else NO_POP

    summary = f"{weather} {high}°C/{low}°C"
    description = (
        f"{city_name}: {weather}\n"
        f"Chance of rain: {pop}\n"
        f"High: {high}°C\n"
        f"Low: {low}°C\n"
        f"Source: {SOURCE_NAME}"
    )
    return CalendarEvent(date=record.date, summary=summary, description=description)


def aggregate(
    city_name: str,
    reports: Iterable[Any] | Mapping[str, Any] | None,
) -> list[CalendarEvent]:
    """
    Merge every report for a city into date-sorted calendar events.

    Args:
        city_name: Display name of the city, used in event descriptions.
        reports: The forecast response, a list of reports (a single report
            dict is also accepted).

    Returns:
        One event per forecast day, ascending by date.  Empty if nothing
        in the reports could be merged.
    """
    if reports is None:
        return []
    if isinstance(reports, Mapping):
        reports = [reports]

    records: DayRecords = {}
    for report in reports:
        records = merge_report(records, report)

    return [format_event(city_name, records[day]) for day in sorted(records)]
