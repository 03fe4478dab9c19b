from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Column, Integer, MetaData, Table, insert, select, text
from sqlalchemy.exc import StatementError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from ethiocal.adapters.sqlalchemy import (
    ECDateIsoString,
    GregorianBackedECDate,
    ec_date_composite,
)
from ethiocal.domain.errors import EthiopianDateError
from ethiocal.domain.model import ECDate

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()

permit_table = Table(
    "permit",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("due_date", GregorianBackedECDate()),
    Column("due_date_ec", ECDateIsoString()),
)


class Base(DeclarativeBase):
    pass


class Registration(Base):
    __tablename__ = "registration"

    id: Mapped[int] = mapped_column(primary_key=True)
    issued: Mapped[ECDate] = ec_date_composite(
        mapped_column("issued_year", Integer),
        mapped_column("issued_month", Integer),
        mapped_column("issued_day", Integer),
    )


def test_stores_gregorian_date_and_iso_string(sqlite_engine: Engine) -> None:
    metadata.create_all(sqlite_engine)
    due = ECDate(2017, 1, 15)

    with sqlite_engine.begin() as connection:
        connection.execute(insert(permit_table).values(id=1, due_date=due, due_date_ec=due))
        raw = connection.execute(text("SELECT due_date, due_date_ec FROM permit")).one()
        loaded = connection.execute(
            select(permit_table.c.due_date, permit_table.c.due_date_ec)
        ).one()

    assert tuple(raw) == ("2024-09-25", "2017-01-15")
    assert loaded.due_date == due
    assert loaded.due_date_ec == due


def test_accepts_gregorian_dates_on_bind(sqlite_engine: Engine) -> None:
    metadata.create_all(sqlite_engine)

    with sqlite_engine.begin() as connection:
        connection.execute(
            insert(permit_table).values(
                id=1,
                due_date=date(2024, 9, 11),
                due_date_ec=date(2024, 9, 11),
            )
        )
        loaded = connection.execute(
            select(permit_table.c.due_date, permit_table.c.due_date_ec)
        ).one()

    assert loaded.due_date == ECDate(2017, 1, 1)
    assert loaded.due_date_ec == ECDate(2017, 1, 1)


def test_null_values_pass_through(sqlite_engine: Engine) -> None:
    metadata.create_all(sqlite_engine)

    with sqlite_engine.begin() as connection:
        connection.execute(insert(permit_table).values(id=1, due_date=None, due_date_ec=None))
        loaded = connection.execute(
            select(permit_table.c.due_date, permit_table.c.due_date_ec)
        ).one()

    assert loaded.due_date is None
    assert loaded.due_date_ec is None


@pytest.mark.parametrize("column", ["due_date", "due_date_ec"])
def test_rejects_invalid_dates_on_bind(sqlite_engine: Engine, column: str) -> None:
    metadata.create_all(sqlite_engine)

    with (
        sqlite_engine.begin() as connection,
        pytest.raises((StatementError, EthiopianDateError), match="Pagume"),
    ):
        connection.execute(insert(permit_table).values({"id": 1, column: ECDate(2017, 13, 6)}))


def test_composite_maps_three_integer_columns(sqlite_engine: Engine) -> None:
    Base.metadata.create_all(sqlite_engine)

    with Session(sqlite_engine) as session:
        session.add(Registration(id=1, issued=ECDate(2016, 13, 5)))
        session.commit()

    with Session(sqlite_engine) as session:
        raw = session.execute(
            text("SELECT issued_year, issued_month, issued_day FROM registration")
        ).one()
        registration = session.get(Registration, 1)

        assert tuple(raw) == (2016, 13, 5)
        assert registration is not None
        assert registration.issued == ECDate(2016, 13, 5)
