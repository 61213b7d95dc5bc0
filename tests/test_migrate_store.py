"""Tests for the JSON to SQLite migration script."""

from hourrs.data.hours_data import HoursData
from hourrs.data.store import JsonStore, SqliteStore

import migrate_store

from conftest import make_record


class TestMigrateStore:
    def test_copies_records_and_names(self, tmp_path, clock):
        source = tmp_path / "data"
        data = HoursData(names=["alice"], clock=clock)
        data.dataframe.append(make_record(0, "alice"))
        data.save(JsonStore(source))

        target = tmp_path / "hours.db"
        assert migrate_store.main(["--source", str(source), "--target", str(target)]) == 0

        loaded = SqliteStore(target).load()
        assert loaded.names == ["alice"]
        assert loaded.dataframe.data == data.dataframe.data

    def test_refuses_existing_target(self, tmp_path):
        (tmp_path / "data").mkdir()
        target = tmp_path / "hours.db"
        target.write_text("", encoding="utf-8")
        assert migrate_store.main(["--source", str(tmp_path / "data"), "--target", str(target)]) == 1

    def test_missing_source(self, tmp_path):
        assert migrate_store.main(["--source", str(tmp_path / "nope"), "--target", str(tmp_path / "x.db")]) == 1
