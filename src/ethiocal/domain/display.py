"""Helpers used where Gregorian dates are shown or entered as Ethiopian dates.

Records keep the Gregorian date as their source of truth. These helpers derive the Ethiopian
view on demand, either for storage beside the Gregorian value or for display.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from .calendar import ec_to_gregorian, gregorian_to_ec
from .errors import EthiopianDateError
from .formatting import coerce_locale, coerce_style, format_ec, parse_ec_date
from .model import DateStyle, Locale
from .validation import is_valid_ec_date

log = logging.getLogger(__name__)

_GREGORIAN_FORMATS: dict[DateStyle, str] = {
    DateStyle.ISO: "%Y-%m-%d",
    DateStyle.SHORT: "%m/%d/%Y",
    DateStyle.LONG: "%b {day}, %Y",
}


def ec_iso_for(value: date) -> str:
    """Return the ISO Ethiopian string stored alongside a Gregorian date."""
    return format_ec(gregorian_to_ec(value), Locale.EN, DateStyle.ISO)


def resolve_manual_entry(text: str) -> date | None:
    """Turn a typed ``YYYY-MM-DD`` Ethiopian date into its Gregorian date.

    Returns ``None`` while the text is incomplete or names a day that does not exist, so
    form inputs can call this on every keystroke.
    """

    try:
        ec = parse_ec_date(text.strip())
    except EthiopianDateError as exc:
        log.debug("Ignoring Ethiopian date entry %r: %s", text, exc)
        return None
    if not is_valid_ec_date(ec):
        log.debug("Ignoring out-of-range Ethiopian date entry %r", text)
        return None
    return ec_to_gregorian(ec)


def format_gregorian(value: date, style: str | DateStyle = DateStyle.LONG) -> str:
    if isinstance(value, datetime):
        value = value.date()
    pattern = _GREGORIAN_FORMATS[coerce_style(style)]
    return value.strftime(pattern).replace("{day}", str(value.day))


def display_date(
    value: date,
    *,
    use_ethiopian_calendar: bool = True,
    locale: str | Locale = Locale.EN,
    style: str | DateStyle = DateStyle.LONG,
) -> str:
    """Render a stored Gregorian date in the calendar the organisation has chosen."""

    if use_ethiopian_calendar:
        return format_ec(gregorian_to_ec(value), locale, style)
    coerce_locale(locale)
    return format_gregorian(value, style)


__all__ = ["display_date", "ec_iso_for", "format_gregorian", "resolve_manual_entry"]
