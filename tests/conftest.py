from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from ethiocal.config import DATE_STYLE_ENV, LOCALE_ENV, USE_ETHIOPIAN_CALENDAR_ENV

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from datetime import date

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def _clear_calendar_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (USE_ETHIOPIAN_CALENDAR_ENV, LOCALE_ENV, DATE_STYLE_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def make_clock() -> Callable[[date], Callable[[], date]]:
    def factory(reference: date) -> Callable[[], date]:
        def _clock() -> date:
            return reference

        return _clock

    return factory
