from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from ethiocal.domain.arithmetic import (
    add_days_ec,
    compare_ec_dates,
    current_ec_date,
    diff_days_ec,
)
from ethiocal.domain.model import ECDate

if TYPE_CHECKING:
    from collections.abc import Callable


def test_compare_ec_dates() -> None:
    a = ECDate(year=2017, month=1, day=1)
    b = ECDate(year=2017, month=1, day=15)
    c = ECDate(year=2017, month=1, day=1)

    assert compare_ec_dates(a, b) == -1
    assert compare_ec_dates(b, a) == 1
    assert compare_ec_dates(a, c) == 0


def test_compare_prioritises_year_then_month() -> None:
    assert compare_ec_dates(ECDate(2016, 13, 5), ECDate(2017, 1, 1)) == -1
    assert compare_ec_dates(ECDate(2017, 2, 1), ECDate(2017, 1, 30)) == 1


def test_ec_dates_sort_like_compare() -> None:
    dates = [ECDate(2017, 2, 1), ECDate(2016, 13, 5), ECDate(2017, 1, 30)]

    assert sorted(dates) == [ECDate(2016, 13, 5), ECDate(2017, 1, 30), ECDate(2017, 2, 1)]


def test_add_days_within_month() -> None:
    assert add_days_ec(ECDate(2017, 1, 1), 14) == ECDate(2017, 1, 15)


def test_add_days_across_months() -> None:
    assert add_days_ec(ECDate(2017, 1, 25), 10) == ECDate(2017, 2, 5)


def test_add_negative_days_crosses_into_pagume() -> None:
    assert add_days_ec(ECDate(2017, 1, 1), -1) == ECDate(2016, 13, 5)


def test_add_days_through_leap_pagume() -> None:
    assert add_days_ec(ECDate(2015, 1, 1), 365) == ECDate(2015, 13, 6)
    assert add_days_ec(ECDate(2015, 1, 1), 366) == ECDate(2016, 1, 1)


def test_diff_days() -> None:
    a = ECDate(year=2017, month=1, day=1)
    b = ECDate(year=2017, month=1, day=15)

    assert diff_days_ec(a, b) == 14
    assert diff_days_ec(b, a) == -14
    assert diff_days_ec(a, a) == 0


def test_diff_days_spans_year_lengths() -> None:
    assert diff_days_ec(ECDate(2015, 1, 1), ECDate(2016, 1, 1)) == 366
    assert diff_days_ec(ECDate(2016, 1, 1), ECDate(2017, 1, 1)) == 365


def test_add_then_diff_is_consistent() -> None:
    start = ECDate(2016, 11, 20)
    for days in (-400, -30, 0, 45, 500):
        assert diff_days_ec(start, add_days_ec(start, days)) == days


def test_current_ec_date_uses_clock(make_clock: Callable[[date], Callable[[], date]]) -> None:
    assert current_ec_date(clock=make_clock(date(2024, 9, 11))) == ECDate(2017, 1, 1)


def test_current_ec_date_defaults_to_today() -> None:
    result = current_ec_date()

    assert result.year >= 2017
    assert 1 <= result.month <= 13
