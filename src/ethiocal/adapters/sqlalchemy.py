"""SQLAlchemy column types for persisting Ethiopian dates.

The Gregorian date is the stored source of truth. :class:`GregorianBackedECDate` exposes such a
column as :class:`ECDate` values, and :class:`ECDateIsoString` keeps the derived ``YYYY-MM-DD``
Ethiopian string that is stored beside it for display and search.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Dialect, String, TypeDecorator
from sqlalchemy.orm import composite

from ethiocal.domain.calendar import check_ec_date, ec_to_gregorian, gregorian_to_ec
from ethiocal.domain.formatting import format_ec, parse_ec_date
from ethiocal.domain.model import DateStyle, ECDate, Locale

if TYPE_CHECKING:
    from sqlalchemy.orm import Composite, MappedColumn
    from sqlalchemy.sql.schema import Column

ISO_COLUMN_LENGTH = 16


class GregorianBackedECDate(TypeDecorator[ECDate]):
    impl = Date
    cache_ok = True

    @property
    def python_type(self) -> type[ECDate]:
        return ECDate

    def process_bind_param(self, value: ECDate | date | None, dialect: Dialect) -> date | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, ECDate):
            return ec_to_gregorian(value)
        return value

    def process_result_value(self, value: date | None, dialect: Dialect) -> ECDate | None:
        _ = dialect
        if value is None:
            return None
        return gregorian_to_ec(value)


class ECDateIsoString(TypeDecorator[ECDate]):
    impl = String(ISO_COLUMN_LENGTH)
    cache_ok = True

    @property
    def python_type(self) -> type[ECDate]:
        return ECDate

    def process_bind_param(self, value: ECDate | date | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if not isinstance(value, ECDate):
            value = gregorian_to_ec(value)
        check_ec_date(value)
        return format_ec(value, Locale.EN, DateStyle.ISO)

    def process_result_value(self, value: str | None, dialect: Dialect) -> ECDate | None:
        _ = dialect
        if value is None:
            return None
        return parse_ec_date(value)


def ec_date_composite(
    year: Column[int] | MappedColumn[int],
    month: Column[int] | MappedColumn[int],
    day: Column[int] | MappedColumn[int],
) -> Composite[ECDate]:
    """Map three integer columns onto a single :class:`ECDate` attribute."""

    return composite(ECDate, year, month, day)


__all__ = ["ISO_COLUMN_LENGTH", "ECDateIsoString", "GregorianBackedECDate", "ec_date_composite"]
