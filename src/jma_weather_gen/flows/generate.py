"""
Prefect flow that turns JMA forecasts into per-city calendar files.

Cities are processed one at a time.  A failure for one city (fetch error,
nothing parsed, write error) is logged and skips that city only; an empty
city list ends the run without writing anything.

Run locally:
    python -m jma_weather_gen.flows.generate
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from prefect import flow, task

from jma_weather_gen.analysis.daily_forecast import aggregate
from jma_weather_gen.config import get_settings, load_cities
from jma_weather_gen.datasources.jma import forecast as jma_forecast
from jma_weather_gen.output import write_calendar
from jma_weather_gen.renderers.ical import render_calendar
from jma_weather_gen.schemas import CalendarEvent

logger = logging.getLogger(__name__)


@task(name="fetch-city-forecast")
def fetch_city_forecast(area_code: str) -> Any | None:
    """Fetch the JMA forecast bulletin for one area code (single attempt)."""
    settings = get_settings()
    return jma_forecast.fetch_forecast(
        area_code,
        base_url=settings.forecast_api,
        timeout=settings.http_timeout,
    )


@task(name="build-city-events")
def build_city_events(city_name: str, reports: Any) -> list[CalendarEvent]:
    """Merge the forecast reports into date-sorted calendar events."""
    return aggregate(city_name, reports)


@task(name="render-city-calendar")
def render_city_calendar(events: list[CalendarEvent]) -> str:
    """Render events into an iCalendar document."""
    return render_calendar(events)


@task(name="save-city-calendar")
def save_city_calendar(city_name: str, content: str, output_dir: Path) -> Path | None:
    """Write the calendar file; None if it could not be written."""
    return write_calendar(output_dir, city_name, content)


@flow(name="generate-calendars")
def generate_all(
    output_dir: Path | str | None = None,
    cities_file: Path | str | None = None,
) -> dict[str, Any]:
    """
    Generate one calendar file per configured city.

    Args:
        output_dir: Where to write ``<city>.ics`` (default from settings).
        cities_file: YAML city → area code mapping (default from settings).

    Returns:
        Summary with ``cities`` (count configured), ``written`` (paths) and
        ``skipped`` (city names that produced no file).
    """
    settings = get_settings()
    out = Path(output_dir) if output_dir is not None else settings.output_dir
    cities = load_cities(cities_file if cities_file is not None else settings.cities_file)

    results: dict[str, Any] = {"cities": len(cities), "written": [], "skipped": []}

    if not cities:
        logger.warning("No cities found in config. Exiting.")
        return results

    for city, code in cities.items():
        logger.info("Processing %s (%s)...", city, code)

        reports = fetch_city_forecast(code)
        if reports is None:
            # Already logged by the fetcher
            results["skipped"].append(city)
            continue

        events = build_city_events(city, reports)
        if not events:
            logger.warning("No events parsed for %s", city)
            results["skipped"].append(city)
            continue

        content = render_city_calendar(events)
        path = save_city_calendar(city, content, out)
        if path is None:
            results["skipped"].append(city)
        else:
            results["written"].append(path)

    logger.info(
        "Wrote %d of %d calendars to %s", len(results["written"]), len(cities), out
    )
    return results


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    result = generate_all()
    print(f"Flow complete: {result}")
