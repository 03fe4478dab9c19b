from __future__ import annotations

import pytest
from pydantic import ValidationError

from ethiocal.adapters.schema import ECDatePayload
from ethiocal.domain.model import ECDate


def test_payload_from_mapping() -> None:
    payload = ECDatePayload.model_validate({"year": 2017, "month": 1, "day": 15})

    assert payload.to_domain() == ECDate(2017, 1, 15)
    assert payload.iso == "2017-01-15"


def test_payload_from_iso_string() -> None:
    payload = ECDatePayload.model_validate(" 2015-13-06 ")

    assert payload.to_domain() == ECDate(2015, 13, 6)


def test_payload_from_json() -> None:
    from_object = ECDatePayload.model_validate_json('{"year": 2017, "month": 2, "day": 5}')
    from_string = ECDatePayload.model_validate_json('"2017-02-05"')

    assert from_object == from_string


def test_payload_round_trips_domain_value() -> None:
    ec = ECDate(2016, 13, 5)

    assert ECDatePayload.from_domain(ec).to_domain() == ec
    assert ECDatePayload.model_validate(ec).to_domain() == ec


@pytest.mark.parametrize(
    "value",
    [
        "2017/01/15",
        "2017-01-XX",
        "2017-13-06",
        {"year": 2017, "month": 14, "day": 1},
        {"year": 2017, "month": 1},
    ],
)
def test_payload_rejects_invalid_dates(value: object) -> None:
    with pytest.raises(ValidationError):
        ECDatePayload.model_validate(value)


def test_payload_dumps_fields() -> None:
    payload = ECDatePayload.model_validate("2017-01-15")

    assert payload.model_dump() == {"year": 2017, "month": 1, "day": 15}
