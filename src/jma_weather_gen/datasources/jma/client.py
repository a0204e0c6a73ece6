"""JMA forecast API constants.

Endpoint: ``{JMA_FORECAST_API}/{area_code}.json`` returns a JSON array of
reports.  The first report holds the short-range (3-day) forecast, the second
the weekly forecast.  Each report's ``timeSeries`` is a list of sections.
"""

from jma_weather_gen.config import JMA_FORECAST_API

#: Only the first area of each section is read; a city maps to one area code.
PRIMARY_AREA_INDEX = 0

SOURCE_NAME = "Japan Meteorological Agency"


def forecast_url(area_code: str, base_url: str = JMA_FORECAST_API) -> str:
    """Build the forecast URL for an area code."""
    return f"{base_url.rstrip('/')}/{area_code}.json"
