"""Write rendered calendars to the output directory.

One file per city, ``<output_dir>/<city>.ics``.  Files are written as UTF-8
bytes exactly as rendered (no newline translation), so CRLF line endings
survive on every platform.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CALENDAR_SUFFIX = ".ics"


def calendar_path(output_dir: Path, city_name: str) -> Path:
    """Path of a city's calendar file inside the output directory."""
    return output_dir / f"{city_name}{CALENDAR_SUFFIX}"


def write_calendar(output_dir: Path, city_name: str, content: str) -> Path | None:
    """
    Write one city's calendar, creating the output directory if needed.

    Args:
        output_dir: Directory to write into.
        city_name: City display name, used as the file stem.
        content: Rendered calendar document.

    Returns:
        The written path, or None if the directory or file could not be written.
    """
    full = calendar_path(output_dir, city_name)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with full.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error("Failed to write file %s: %s", full, e)
        return None

    logger.info("Generated %s", full)
    return full
