"""Tests for HoursData session transitions, roster and admin edits."""

import pytest

from hourrs.data.hours_data import HoursData, EndHoursPolicy
from hourrs.data.hours import Hours
from hourrs.data.period import Period
from hourrs.utils.errors import AlreadyStartedError, NotFoundError, ValidationError

from conftest import make_record


class TestStart:
    def test_appends_open_record(self, hours_data):
        record = hours_data.start("alice")
        assert record.index == record.rowid == 0
        assert (record.year, record.month) == (2024, 1)
        assert record.start == "2024-01-15 09:00:00"
        assert record.end == ""
        assert record.hours == ""
        assert hours_data.is_started("alice")

    def test_index_is_record_count(self, hours_data):
        hours_data.start("alice")
        assert hours_data.start("bob").rowid == 1

    def test_duplicate_start_rejected(self, hours_data):
        hours_data.start("alice")
        with pytest.raises(AlreadyStartedError):
            hours_data.start("alice")
        assert len(hours_data.dataframe) == 1

    def test_duplicate_start_allowed_when_not_strict(self, clock):
        data = HoursData(names=["alice"], clock=clock, strict_start=False)
        data.start("alice")
        data.start("alice")
        assert len(data.dataframe.records_for("alice")) == 2


class TestEnd:
    def test_start_then_end(self, hours_data, clock):
        hours_data.start("alice")
        clock.advance(hours=2, minutes=15)
        record = hours_data.end("alice")
        assert record.end == "2024-01-15 11:15:00"
        assert record.hours == ""
        assert record.display_hours() == "02:15"
        records = hours_data.dataframe.records_for("alice")
        assert len(records) == 1 and records[0].end != ""
        assert not hours_data.is_started("alice")

        with pytest.raises(NotFoundError):
            hours_data.end("alice")

    def test_end_without_start(self, hours_data):
        with pytest.raises(NotFoundError, match="no start record found"):
            hours_data.end("bob")

    def test_closes_last_open_record(self, clock):
        data = HoursData(clock=clock, strict_start=False)
        data.start("alice")
        clock.advance(hours=1)
        data.start("alice")
        clock.advance(hours=1)
        closed = data.end("alice")
        assert closed.rowid == 1
        assert data.dataframe.get(0).is_open()

    def test_store_policy_writes_hours(self, clock):
        data = HoursData(clock=clock, end_policy=EndHoursPolicy.STORE)
        data.start("alice")
        clock.advance(hours=1, minutes=30)
        assert data.end("alice").hours == "1.5"

    def test_defer_policy_clears_hours(self, hours_data):
        hours_data.dataframe.append(make_record(0, "alice", end="", hours="3"))
        assert hours_data.end("alice").hours == ""

    def test_store_policy_with_bad_start(self, clock):
        data = HoursData(clock=clock, end_policy="store")
        data.dataframe.append(make_record(0, "alice", start="broken", end=""))
        record = data.end("alice")
        assert record.end == "2024-01-15 09:00:00"
        assert record.hours == ""


class TestIsStarted:
    def test_only_last_record_counts(self, hours_data):
        hours_data.dataframe.append(make_record(0, "alice", end=""))
        hours_data.dataframe.append(make_record(1, "alice"))
        assert not hours_data.is_started("alice")

    def test_started_names(self, hours_data):
        hours_data.start("bob")
        assert hours_data.started_names() == ["bob"]


class TestRoster:
    def test_add(self, hours_data):
        hours_data.add_name("  carol ")
        assert hours_data.names == ["alice", "bob", "carol"]

    @pytest.mark.parametrize("name", ["", "   ", "alice"])
    def test_add_rejects(self, hours_data, name):
        with pytest.raises(ValidationError):
            hours_data.add_name(name)

    def test_remove_keeps_records(self, hours_data):
        hours_data.start("alice")
        hours_data.remove_name("alice")
        assert hours_data.names == ["bob"]
        assert len(hours_data.dataframe) == 1

    def test_remove_unknown(self, hours_data):
        with pytest.raises(NotFoundError):
            hours_data.remove_name("carol")

    def test_move(self, hours_data):
        hours_data.move_name_up("bob")
        assert hours_data.names == ["bob", "alice"]
        hours_data.move_name_up("bob")
        assert hours_data.names == ["bob", "alice"]
        hours_data.move_name_down("bob")
        assert hours_data.names == ["alice", "bob"]
        hours_data.move_name_down("bob")
        assert hours_data.names == ["alice", "bob"]

    def test_move_unknown(self, hours_data):
        with pytest.raises(NotFoundError):
            hours_data.move_name_down("carol")


class TestSetHours:
    def test_override_and_clear(self, hours_data):
        hours_data.dataframe.append(make_record(0, "alice"))
        hours_data.set_hours(0, "7.75")
        assert hours_data.hours_for_period("alice", Period(2024, 1)) == Hours(7.75)
        hours_data.set_hours(0, "")
        assert hours_data.hours_for_period("alice", Period(2024, 1)) == Hours(8.5)

    def test_rejects_non_number(self, hours_data):
        hours_data.dataframe.append(make_record(0, "alice"))
        with pytest.raises(ValidationError):
            hours_data.set_hours(0, "eight")

    @pytest.mark.parametrize("value", ["nan", "inf", "1e400"])
    def test_rejects_non_finite(self, hours_data, value):
        hours_data.dataframe.append(make_record(0, "alice"))
        with pytest.raises(ValidationError):
            hours_data.set_hours(0, value)
        assert hours_data.dataframe.get(0).display_hours() == "08:30"

    def test_unknown_rowid(self, hours_data):
        with pytest.raises(NotFoundError):
            hours_data.set_hours(5, "1")


class TestQueries:
    def test_passthroughs(self, hours_data, clock):
        hours_data.start("alice")
        clock.advance(hours=3)
        hours_data.end("alice")
        period = Period(2024, 1)
        assert hours_data.hours_for_period("alice", period) == Hours(3.0)
        assert hours_data.status_for_period("alice", period) == "03:00"
        assert hours_data.first_period() == hours_data.last_period() == period
