"""Calendar display settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ethiocal.domain.errors import UnsupportedLocaleError, UnsupportedStyleError
from ethiocal.domain.formatting import coerce_locale, coerce_style
from ethiocal.domain.model import DateStyle, Locale

from .env import env_flag, optional_env_var
from .errors import ConfigurationError

USE_ETHIOPIAN_CALENDAR_ENV: Final[str] = "ETHIOCAL_USE_ETHIOPIAN_CALENDAR"
LOCALE_ENV: Final[str] = "ETHIOCAL_LOCALE"
DATE_STYLE_ENV: Final[str] = "ETHIOCAL_DATE_STYLE"


@dataclass(frozen=True, slots=True)
class CalendarConfig:
    """Organisation-wide preferences for showing dates."""

    use_ethiopian_calendar: bool = True
    locale: Locale = Locale.EN
    style: DateStyle = DateStyle.LONG


def get_calendar_config() -> CalendarConfig:
    use_ethiopian_calendar = env_flag(USE_ETHIOPIAN_CALENDAR_ENV, default=True)
    raw_locale = optional_env_var(LOCALE_ENV)
    raw_style = optional_env_var(DATE_STYLE_ENV)

    try:
        locale = coerce_locale(raw_locale) if raw_locale else Locale.EN
    except UnsupportedLocaleError as exc:
        raise ConfigurationError(LOCALE_ENV, str(exc)) from exc

    try:
        style = coerce_style(raw_style) if raw_style else DateStyle.LONG
    except UnsupportedStyleError as exc:
        raise ConfigurationError(DATE_STYLE_ENV, str(exc)) from exc

    return CalendarConfig(
        use_ethiopian_calendar=use_ethiopian_calendar,
        locale=locale,
        style=style,
    )
