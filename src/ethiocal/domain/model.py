"""Value types shared by the Ethiopian calendar helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

PAGUME: Final[int] = 13
DAYS_PER_MONTH: Final[int] = 30
DAYS_BEFORE_PAGUME: Final[int] = 360


class Locale(StrEnum):
    """Languages with a month-name table."""

    EN = "en"
    AM = "am"


class DateStyle(StrEnum):
    """Supported string renderings of a date."""

    LONG = "long"
    SHORT = "short"
    ISO = "iso"


EC_MONTHS_EN: Final[tuple[str, ...]] = (
    "Meskerem",
    "Tikimt",
    "Hidar",
    "Tahsas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Ginbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagumen",
)

EC_MONTHS_AM: Final[tuple[str, ...]] = (
    "መስከረም",
    "ጥቅምት",
    "ኅዳር",
    "ታኅሳስ",
    "ጥር",
    "የካቲት",
    "መጋቢት",
    "ሚያዝያ",
    "ግንቦት",
    "ሰኔ",
    "ኃምሌ",
    "ነሐሴ",
    "ጳጉሜን",
)

MONTH_NAMES: Final[dict[Locale, tuple[str, ...]]] = {
    Locale.EN: EC_MONTHS_EN,
    Locale.AM: EC_MONTHS_AM,
}


@dataclass(frozen=True, slots=True, order=True)
class ECDate:
    """A day in the Ethiopian calendar.

    ``month`` runs from 1 (Meskerem) to 13 (Pagume). Instances are plain values and are not
    range-checked on construction; use :func:`ethiocal.domain.validation.is_valid_ec_date`
    when the fields come from untrusted input. Ordering compares ``(year, month, day)``.
    """

    year: int
    month: int
    day: int

    @property
    def is_pagume(self) -> bool:
        return self.month == PAGUME

    def __composite_values__(self) -> tuple[int, int, int]:
        """Return values in a shape suitable for SQLAlchemy composite columns."""
        return (self.year, self.month, self.day)


__all__ = [
    "DAYS_BEFORE_PAGUME",
    "DAYS_PER_MONTH",
    "EC_MONTHS_AM",
    "EC_MONTHS_EN",
    "MONTH_NAMES",
    "PAGUME",
    "DateStyle",
    "ECDate",
    "Locale",
]
