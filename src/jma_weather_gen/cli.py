"""
Command-line interface for the application.

This module provides the main entry point for the CLI::

    jma-weather-gen                      # writes doc/<city>.ics
    jma-weather-gen --output-dir public  # writes public/<city>.ics
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from jma_weather_gen import __version__
from jma_weather_gen.config import get_settings
from jma_weather_gen.flows.generate import generate_all

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="jma-weather-gen",
        description="Generate per-city iCalendar files from JMA weather forecasts",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the .ics files (default: output_dir from settings)",
    )
    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Run the calendar generation flow."""
    settings = get_settings()
    output_dir = args.output_dir if args.output_dir is not None else settings.output_dir

    try:
        generate_all(output_dir=output_dir)
    except Exception:
        logging.getLogger(__name__).exception("Calendar generation failed")
        return 1
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    parser = create_parser()
    args = parser.parse_args()
    return cmd_run(args)


if __name__ == "__main__":
    sys.exit(main())
