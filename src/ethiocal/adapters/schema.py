"""Pydantic model for Ethiopian dates received from forms and JSON APIs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from ethiocal.domain.calendar import check_ec_date
from ethiocal.domain.formatting import format_ec, parse_ec_date
from ethiocal.domain.model import DateStyle, ECDate, Locale


class ECDatePayload(BaseModel):
    """An Ethiopian date given either as ``{"year", "month", "day"}`` or ``"YYYY-MM-DD"``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    year: int
    month: int
    day: int

    @model_validator(mode="before")
    @classmethod
    def _expand_iso_string(cls, value: object) -> object:
        if isinstance(value, str):
            parsed = parse_ec_date(value.strip())
            return {"year": parsed.year, "month": parsed.month, "day": parsed.day}
        if isinstance(value, ECDate):
            return {"year": value.year, "month": value.month, "day": value.day}
        return value

    @model_validator(mode="after")
    def _check_calendar_day(self) -> ECDatePayload:
        check_ec_date(self.to_domain())
        return self

    def to_domain(self) -> ECDate:
        return ECDate(year=self.year, month=self.month, day=self.day)

    @classmethod
    def from_domain(cls, ec: ECDate) -> ECDatePayload:
        return cls(year=ec.year, month=ec.month, day=ec.day)

    @property
    def iso(self) -> str:
        return format_ec(self.to_domain(), Locale.EN, DateStyle.ISO)


__all__ = ["ECDatePayload"]
