"""Forecast aggregation: raw datasource payloads → per-day domain records.

Dependency rule: analysis/ imports from datasources/ models only.
It never fetches data or produces calendar text.

Modules:
  - daily_forecast: JMA time-series sections -> date-sorted CalendarEvents
"""

from jma_weather_gen.analysis.daily_forecast import (
    DateParseError,
    DayRecord,
    aggregate,
    extract_date,
    merge_report,
    merge_section,
)

__all__ = [
    "DateParseError",
    "DayRecord",
    "aggregate",
    "extract_date",
    "merge_report",
    "merge_section",
]
