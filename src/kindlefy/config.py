"""Environment-driven settings."""

import logging
import os


DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """Return the level named by KINDLEFY_LOG_LEVEL, falling back to WARNING."""
    name = os.environ.get("KINDLEFY_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def color_enabled() -> bool:
    """Color is on unless NO_COLOR is set to a non-empty value."""
    return not os.environ.get("NO_COLOR")
