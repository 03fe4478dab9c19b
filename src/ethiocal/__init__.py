"""Conversion between the Gregorian and Ethiopian calendars."""

from __future__ import annotations

from importlib import metadata

from ethiocal.domain.arithmetic import (
    Clock,
    add_days_ec,
    compare_ec_dates,
    current_ec_date,
    diff_days_ec,
)
from ethiocal.domain.calendar import (
    day_of_year,
    ec_to_gregorian,
    ethiopian_new_year,
    gregorian_to_ec,
    is_ethiopian_leap_year,
    is_gregorian_leap_year,
    pagume_length,
)
from ethiocal.domain.display import display_date, ec_iso_for, resolve_manual_entry
from ethiocal.domain.errors import (
    EthiopianDateError,
    InvalidDayError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidPagumeDayError,
    NonNumericComponentError,
    UnsupportedLocaleError,
    UnsupportedStyleError,
)
from ethiocal.domain.formatting import format_ec, month_name, parse_ec_date
from ethiocal.domain.model import EC_MONTHS_AM, EC_MONTHS_EN, DateStyle, ECDate, Locale
from ethiocal.domain.validation import is_valid_ec_date

try:
    __version__ = metadata.version("ethiocal")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [  # noqa: RUF022
    # model
    "ECDate",
    "DateStyle",
    "Locale",
    "EC_MONTHS_AM",
    "EC_MONTHS_EN",
    # errors
    "EthiopianDateError",
    "InvalidDayError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidPagumeDayError",
    "NonNumericComponentError",
    "UnsupportedLocaleError",
    "UnsupportedStyleError",
    # calendar
    "day_of_year",
    "ec_to_gregorian",
    "ethiopian_new_year",
    "gregorian_to_ec",
    "is_ethiopian_leap_year",
    "is_gregorian_leap_year",
    "pagume_length",
    # formatting and validation
    "format_ec",
    "is_valid_ec_date",
    "month_name",
    "parse_ec_date",
    # arithmetic
    "Clock",
    "add_days_ec",
    "compare_ec_dates",
    "current_ec_date",
    "diff_days_ec",
    # display
    "display_date",
    "ec_iso_for",
    "resolve_manual_entry",
    "__version__",
]
