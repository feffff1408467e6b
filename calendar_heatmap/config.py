"""
Configuration management for calendar-heatmap.

Loads service settings (logging and the demo page) from environment
variables. Widget options are never read from the environment; callers pass
them per request.
"""

import logging
import os

from dotenv import load_dotenv

from calendar_heatmap.date_grid import parse_year_month

# Load .env file from project root
load_dotenv()

LOG_LEVEL = os.getenv("HEATMAP_LOG_LEVEL", "INFO")
DEMO_START = os.getenv("HEATMAP_DEMO_START", "2025-01")
DEMO_END = os.getenv("HEATMAP_DEMO_END", "2025-12")
DEMO_SEED = os.getenv("HEATMAP_DEMO_SEED", "42")


def get_log_level() -> int:
    """Return the numeric logging level for LOG_LEVEL (INFO if unknown)."""
    level = logging.getLevelName(LOG_LEVEL.upper())
    return level if isinstance(level, int) else logging.INFO


def validate_config():
    """Validate that the configured settings are usable."""
    invalid = []

    if not isinstance(logging.getLevelName(LOG_LEVEL.upper()), int):
        invalid.append(f"HEATMAP_LOG_LEVEL={LOG_LEVEL!r}")

    for name, value in (("HEATMAP_DEMO_START", DEMO_START), ("HEATMAP_DEMO_END", DEMO_END)):
        try:
            parse_year_month(value)
        except ValueError:
            invalid.append(f"{name}={value!r}")

    if not DEMO_SEED.lstrip("-").isdigit():
        invalid.append(f"HEATMAP_DEMO_SEED={DEMO_SEED!r}")

    if invalid:
        raise ValueError(
            f"Invalid configuration: {', '.join(invalid)}\n"
            "Months use the YYYY-MM format, the seed must be an integer and the "
            "log level a standard logging level name."
        )
