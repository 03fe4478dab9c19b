"""Application configuration helpers."""

from __future__ import annotations

from .calendar import (
    DATE_STYLE_ENV,
    LOCALE_ENV,
    USE_ETHIOPIAN_CALENDAR_ENV,
    CalendarConfig,
    get_calendar_config,
)
from .env import env_flag, optional_env_var
from .errors import ConfigurationError
from .logging import LOG_DATE_FORMAT, LOG_FORMAT, configure_logging, verbosity_level

__all__ = [
    "DATE_STYLE_ENV",
    "LOCALE_ENV",
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "USE_ETHIOPIAN_CALENDAR_ENV",
    "CalendarConfig",
    "ConfigurationError",
    "configure_logging",
    "env_flag",
    "get_calendar_config",
    "optional_env_var",
    "verbosity_level",
]
