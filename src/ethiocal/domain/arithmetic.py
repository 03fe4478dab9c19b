"""Comparison and day arithmetic on Ethiopian dates."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Literal, Protocol, TypeAlias

from .calendar import ec_to_gregorian, gregorian_to_ec
from .model import ECDate

Ordering: TypeAlias = Literal[-1, 0, 1]  # noqa: UP040


class Clock(Protocol):
    def __call__(self) -> date: ...


def _today() -> date:
    return date.today()  # noqa: DTZ011


def compare_ec_dates(a: ECDate, b: ECDate) -> Ordering:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``."""

    left = (a.year, a.month, a.day)
    right = (b.year, b.month, b.day)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def add_days_ec(ec: ECDate, days: int) -> ECDate:
    """Shift ``ec`` by ``days`` calendar days (negative values move backwards)."""
    return gregorian_to_ec(ec_to_gregorian(ec) + timedelta(days=days))


def diff_days_ec(a: ECDate, b: ECDate) -> int:
    """Return the number of days from ``a`` to ``b``; positive when ``b`` is later."""
    return (ec_to_gregorian(b) - ec_to_gregorian(a)).days


def current_ec_date(*, clock: Clock = _today) -> ECDate:
    return gregorian_to_ec(clock())


__all__ = [
    "Clock",
    "Ordering",
    "add_days_ec",
    "compare_ec_dates",
    "current_ec_date",
    "diff_days_ec",
]
