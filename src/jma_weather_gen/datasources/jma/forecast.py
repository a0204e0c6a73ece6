"""Daily forecast bulletins from the JMA forecast API."""

from __future__ import annotations

import logging
from typing import Any

import requests

from jma_weather_gen.config import JMA_FORECAST_API
from jma_weather_gen.datasources.jma.client import forecast_url
from jma_weather_gen.services.http import session

logger = logging.getLogger(__name__)


def fetch_forecast(
    area_code: str,
    *,
    base_url: str = JMA_FORECAST_API,
    timeout: float | None = None,
) -> Any | None:
    """
    Fetch the forecast bulletin for one area code.

    Single attempt.  Anything other than HTTP 200 with a JSON body is
    logged and reported as ``None``.

    Args:
        area_code: JMA area code (e.g. ``"130000"`` for Tokyo).
        base_url: Forecast API base URL.
        timeout: Request timeout in seconds (session default if omitted).

    Returns:
        Parsed JSON body (normally a list of reports), or None on failure.
    """
    url = forecast_url(area_code, base_url)
    kwargs: dict[str, Any] = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    try:
        resp = session.get(url, **kwargs)
    except requests.RequestException as e:
        logger.error("Error fetching data for %s: %s", area_code, e)
        return None

    if resp.status_code != 200:
        logger.error("Error fetching data for %s: HTTP %d", area_code, resp.status_code)
        return None

    try:
        return resp.json()
    except ValueError as e:
        logger.error("Error decoding forecast for %s: %s", area_code, e)
        return None
