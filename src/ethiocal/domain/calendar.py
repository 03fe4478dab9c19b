"""Conversion between the Gregorian and Ethiopian calendars.

The Ethiopian year has twelve months of thirty days followed by Pagume, which has five days,
or six in the year before a year divisible by four. The year starts on Meskerem 1, which falls
on 11 September of the Gregorian year ``ec_year + 7`` (12 September ahead of a Gregorian leap
year) for the 1900 to 2099 range.

Meskerem 1 is located by counting days from the Ethiopian epoch, so both directions of the
conversion are exact inverses of each other for every representable day.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Final

from .errors import InvalidDayError, InvalidMonthError, InvalidPagumeDayError
from .model import DAYS_BEFORE_PAGUME, DAYS_PER_MONTH, PAGUME, ECDate

# Meskerem 1 of year 1 in the proleptic Gregorian calendar (29 August 8 Julian).
ETHIOPIAN_EPOCH: Final[date] = date(8, 8, 27)
_EPOCH_ORDINAL: Final[int] = ETHIOPIAN_EPOCH.toordinal()

# Gregorian year holding most of an Ethiopian year.
GREGORIAN_YEAR_OFFSET: Final[int] = 7


def is_ethiopian_leap_year(ec_year: int) -> bool:
    """Return ``True`` when Pagume of ``ec_year`` has six days."""
    return (ec_year + 1) % 4 == 0


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_year(year: int) -> int:
    return 366 if is_gregorian_leap_year(year) else 365


def pagume_length(ec_year: int) -> int:
    return 6 if is_ethiopian_leap_year(ec_year) else 5


def day_of_year(value: date) -> int:
    """Return the 1-based position of ``value`` within its Gregorian year."""
    return value.toordinal() - date(value.year, 1, 1).toordinal() + 1


def ethiopian_new_year(ec_year: int) -> date:
    """Return the Gregorian date of Meskerem 1 for ``ec_year``."""

    elapsed = 365 * (ec_year - 1) + ec_year // 4
    return date.fromordinal(_EPOCH_ORDINAL + elapsed)


def _to_calendar_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _from_day_of_year(ec_year: int, day_of_ec_year: int) -> ECDate:
    if day_of_ec_year <= DAYS_BEFORE_PAGUME:
        month = (day_of_ec_year - 1) // DAYS_PER_MONTH + 1
        day = (day_of_ec_year - 1) % DAYS_PER_MONTH + 1
        return ECDate(year=ec_year, month=month, day=day)
    return ECDate(year=ec_year, month=PAGUME, day=day_of_ec_year - DAYS_BEFORE_PAGUME)


def gregorian_to_ec(value: date) -> ECDate:
    """Convert a Gregorian ``date`` (or the calendar date of a ``datetime``)."""

    value = _to_calendar_date(value)
    year = value.year
    new_year = ethiopian_new_year(year - GREGORIAN_YEAR_OFFSET)

    if value < new_year:
        # Still inside the Ethiopian year that began in the previous Gregorian year.
        ec_year = year - GREGORIAN_YEAR_OFFSET - 1
        previous_new_year = ethiopian_new_year(ec_year)
        day_of_ec_year = (
            days_in_gregorian_year(year - 1)
            - day_of_year(previous_new_year)
            + day_of_year(value)
            + 1
        )
    else:
        ec_year = year - GREGORIAN_YEAR_OFFSET
        day_of_ec_year = day_of_year(value) - day_of_year(new_year) + 1

    return _from_day_of_year(ec_year, day_of_ec_year)


def check_ec_date(ec: ECDate) -> None:
    """Raise if ``ec`` does not name a day of the Ethiopian calendar.

    The month is checked first, then the coarse 1..30 day bound, then the leap-aware length
    of Pagume.
    """

    if ec.month < 1 or ec.month > PAGUME:
        raise InvalidMonthError(f"Invalid Ethiopian month {ec.month}: must be 1-13")
    if ec.day < 1 or ec.day > DAYS_PER_MONTH:
        raise InvalidDayError(
            f"Invalid Ethiopian day {ec.day}: must be 1-30 (1-5 or 1-6 for Pagume)"
        )
    if ec.month == PAGUME and ec.day > pagume_length(ec.year):
        raise InvalidPagumeDayError(
            f"Invalid Pagume day {ec.day} for year {ec.year}: "
            f"Pagume has {pagume_length(ec.year)} days"
        )


def ec_to_gregorian(ec: ECDate) -> date:
    """Convert an Ethiopian date to its Gregorian ``date``."""

    check_ec_date(ec)

    if ec.month == PAGUME:
        offset = DAYS_BEFORE_PAGUME + (ec.day - 1)
    else:
        offset = (ec.month - 1) * DAYS_PER_MONTH + (ec.day - 1)

    return ethiopian_new_year(ec.year) + timedelta(days=offset)


__all__ = [
    "ETHIOPIAN_EPOCH",
    "GREGORIAN_YEAR_OFFSET",
    "check_ec_date",
    "day_of_year",
    "days_in_gregorian_year",
    "ec_to_gregorian",
    "ethiopian_new_year",
    "gregorian_to_ec",
    "is_ethiopian_leap_year",
    "is_gregorian_leap_year",
    "pagume_length",
]
