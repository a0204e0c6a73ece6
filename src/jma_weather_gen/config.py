"""
Application settings and the city → area-code mapping.

Settings come from environment variables prefixed ``JMA_`` (or a ``.env``
file).  The list of cities lives in a separate YAML file::

    # cities.yaml
    Tokyo: "130000"
    Osaka: "270000"
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_CITIES_FILE = Path("cities.yaml")
DEFAULT_OUTPUT_DIR = Path("doc")
JMA_FORECAST_API = "https://www.jma.go.jp/bosai/forecast/data/forecast"


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="JMA_",
        env_file=".env",
        extra="ignore",
    )

    cities_file: Path = DEFAULT_CITIES_FILE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    forecast_api: str = JMA_FORECAST_API
    http_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


def load_cities(path: Path | str = DEFAULT_CITIES_FILE) -> dict[str, str]:
    """
    Load the city display name → JMA area code mapping.

    Any failure (missing file, invalid YAML, top level not a mapping) is
    logged and yields an empty mapping.

    Args:
        path: YAML file to read.

    Returns:
        Mapping of city name to area code string, in file order.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Config file '%s' not found or readable: %s", path, e)
        return {}

    if not isinstance(raw, dict):
        logger.error("Config file '%s' must contain a mapping of city to area code", path)
        return {}

    # Unquoted codes such as 130000 load as ints
    return {str(city): str(code) for city, code in raw.items() if code is not None}
