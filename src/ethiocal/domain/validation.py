"""Non-raising validity check for Ethiopian dates."""

from __future__ import annotations

import logging

from .calendar import ec_to_gregorian, pagume_length
from .model import DAYS_PER_MONTH, PAGUME, ECDate

log = logging.getLogger(__name__)


def is_valid_ec_date(ec: ECDate) -> bool:
    """Return whether ``ec`` names an existing Ethiopian day.

    Conversion failures are reported as ``False`` rather than raised. That includes dates
    whose Gregorian image lies outside the range of :class:`datetime.date`.
    """

    if ec.month < 1 or ec.month > PAGUME:
        return False
    if ec.day < 1:
        return False
    if ec.month < PAGUME and ec.day > DAYS_PER_MONTH:
        return False
    if ec.month == PAGUME and ec.day > pagume_length(ec.year):
        return False

    try:
        ec_to_gregorian(ec)
    except (ValueError, OverflowError) as exc:  # EthiopianDateError is a ValueError
        log.debug("Rejecting Ethiopian date %s: %s", ec, exc)
        return False
    return True


__all__ = ["is_valid_ec_date"]
