"""Japan Meteorological Agency (JMA) forecast data source.

Fetches the daily forecast bulletin (short-range + weekly reports) per area
code.  No API key.

Public API:
  - forecast: fetch_forecast
  - models: ForecastReport, ForecastSection, AreaForecast
  - weather_codes: describe_weather_code, WEATHER_CODES
  - client: forecast_url, PRIMARY_AREA_INDEX, SOURCE_NAME
"""

from jma_weather_gen.datasources.jma.client import (
    PRIMARY_AREA_INDEX,
    SOURCE_NAME,
    forecast_url,
)
from jma_weather_gen.datasources.jma.forecast import fetch_forecast
from jma_weather_gen.datasources.jma.models import AreaForecast, ForecastReport, ForecastSection
from jma_weather_gen.datasources.jma.weather_codes import WEATHER_CODES, describe_weather_code

__all__ = [
    "PRIMARY_AREA_INDEX",
    "SOURCE_NAME",
    "WEATHER_CODES",
    "AreaForecast",
    "ForecastReport",
    "ForecastSection",
    "describe_weather_code",
    "fetch_forecast",
    "forecast_url",
]
