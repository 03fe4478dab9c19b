"""Errors raised for malformed or out-of-range Ethiopian dates."""

from __future__ import annotations


class EthiopianDateError(ValueError):
    """Base class for invalid Ethiopian calendar input."""


class InvalidMonthError(EthiopianDateError):
    """Raised when a month lies outside 1..13."""


class InvalidDayError(EthiopianDateError):
    """Raised when a day lies outside 1..30."""


class InvalidPagumeDayError(InvalidDayError):
    """Raised when a Pagume day exceeds the length of Pagume in that year."""


class InvalidFormatError(EthiopianDateError):
    """Raised when a string is not shaped like ``YYYY-MM-DD``."""


class NonNumericComponentError(InvalidFormatError):
    """Raised when a ``YYYY-MM-DD`` segment is not an integer."""


class UnsupportedLocaleError(EthiopianDateError):
    """Raised for a locale without a month-name table."""


class UnsupportedStyleError(EthiopianDateError):
    """Raised for an unknown formatting style."""


__all__ = [
    "EthiopianDateError",
    "InvalidDayError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidPagumeDayError",
    "NonNumericComponentError",
    "UnsupportedLocaleError",
    "UnsupportedStyleError",
]
