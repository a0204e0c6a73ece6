"""JMA Weather Gen - per-city iCalendar files from JMA daily forecasts.

Architecture::

    datasources/   External APIs (JMA forecast bulletins, weather code table)
    analysis/      Forecast aggregation (merge time-series sections per day)
    renderers/     Pure data → iCalendar text
    flows/         Prefect orchestration (fetch, aggregate, render, write per city)
    services/      Shared utilities (HTTP session)
    output.py      Writing calendar files to the output directory

Data flow: config → datasources → analysis → renderers → output/<city>.ics
"""

__version__ = "0.1.0"

from jma_weather_gen.config import Settings
from jma_weather_gen.schemas import CalendarEvent

__all__ = ["CalendarEvent", "Settings", "__version__"]
