"""Rendering and parsing of Ethiopian dates."""

from __future__ import annotations

from .errors import (
    InvalidFormatError,
    InvalidMonthError,
    NonNumericComponentError,
    UnsupportedLocaleError,
    UnsupportedStyleError,
)
from .model import MONTH_NAMES, PAGUME, DateStyle, ECDate, Locale


def coerce_locale(value: str | Locale) -> Locale:
    try:
        return Locale(value)
    except ValueError as exc:
        supported = ", ".join(locale.value for locale in Locale)
        raise UnsupportedLocaleError(
            f"Unsupported locale {value!r}; expected one of: {supported}"
        ) from exc


def coerce_style(value: str | DateStyle) -> DateStyle:
    try:
        return DateStyle(value)
    except ValueError as exc:
        supported = ", ".join(style.value for style in DateStyle)
        raise UnsupportedStyleError(
            f"Unsupported date style {value!r}; expected one of: {supported}"
        ) from exc


def month_name(month: int, locale: str | Locale = Locale.EN) -> str:
    """Return the name of Ethiopian ``month`` (1-13) in ``locale``."""

    names = MONTH_NAMES[coerce_locale(locale)]
    if month < 1 or month > PAGUME:
        raise InvalidMonthError(f"Invalid Ethiopian month {month}: must be 1-13")
    return names[month - 1]


def format_ec(
    ec: ECDate,
    locale: str | Locale = Locale.EN,
    style: str | DateStyle = DateStyle.LONG,
) -> str:
    """Render ``ec`` as ``YYYY-MM-DD`` (iso), ``MM/DD/YYYY`` (short) or ``Month D, YYYY`` (long).

    Only the long style uses ``locale``, but an unknown locale is rejected for every style.
    """

    resolved_locale = coerce_locale(locale)
    resolved_style = coerce_style(style)

    if resolved_style is DateStyle.ISO:
        return f"{ec.year}-{ec.month:02d}-{ec.day:02d}"
    if resolved_style is DateStyle.SHORT:
        return f"{ec.month:02d}/{ec.day:02d}/{ec.year}"
    return f"{month_name(ec.month, resolved_locale)} {ec.day}, {ec.year}"


def parse_ec_date(text: str) -> ECDate:
    """Parse an ISO-shaped ``YYYY-MM-DD`` Ethiopian date.

    Only the shape is checked; month and day ranges are left to
    :func:`ethiocal.domain.validation.is_valid_ec_date`.
    """

    parts = text.split("-")
    if len(parts) != 3:  # noqa: PLR2004
        raise InvalidFormatError(
            f"Invalid Ethiopian date format {text!r}. Expected YYYY-MM-DD"
        )

    try:
        year, month, day = (int(part) for part in parts)
    except ValueError as exc:
        raise NonNumericComponentError(
            f"Invalid Ethiopian date {text!r}: contains non-numeric values"
        ) from exc

    return ECDate(year=year, month=month, day=day)


__all__ = ["coerce_locale", "coerce_style", "format_ec", "month_name", "parse_ec_date"]
