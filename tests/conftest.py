"""Shared fixtures for hourrs tests."""

import datetime
import os

import pytest

from hourrs.data.hours_data import HoursData
from hourrs.data.record import HoursRecord
from hourrs.data.store import JsonStore, SqliteStore
from hourrs.utils.clock import FixedClock


@pytest.fixture
def clock():
    return FixedClock(datetime.datetime(2024, 1, 15, 9, 0, 0))


@pytest.fixture
def hours_data(clock):
    return HoursData(names=["alice", "bob"], clock=clock)


@pytest.fixture
def json_store(tmp_path):
    return JsonStore(tmp_path / "data")


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteStore(tmp_path / "data" / "hours.db")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep HOURRS_* settings from the developer shell out of tests."""
    for key in list(os.environ):
        if key.startswith("HOURRS_"):
            monkeypatch.delenv(key, raising=False)


def make_record(rowid=0, name="alice", start="2024-01-01 09:00:00", end="2024-01-01 17:30:00",
                hours="", year=None, month=None):
    """Build a record; year/month default to those of start."""
    if year is None or month is None:
        year, month = (
            (int(start[:4]), int(start[5:7]))
            if start and start[:4].isdigit() and start[5:7].isdigit()
            else (2024, 1)
        )
    return HoursRecord(
        index=rowid,
        rowid=rowid,
        name=name,
        year=year,
        month=month,
        start=start,
        end=end,
        hours=hours,
    )
