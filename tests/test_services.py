"""Tests for the session service and the admin session."""

import pytest

from hourrs.data.store import JsonStore
from hourrs.services.session_service import SessionService
from hourrs.services.state_service import AdminSession
from hourrs.utils.errors import AdminSessionError, NotFoundError, StoreError


class TestSessionService:
    def test_toggle_starts_then_ends(self, hours_data, json_store, clock):
        service = SessionService(hours_data, json_store)

        result = service.toggle("alice")
        assert result.success and result.action == "start"
        assert json_store.load().is_started("alice")

        clock.advance(hours=4)
        result = service.toggle("alice")
        assert result.success and result.action == "end"
        assert result.record.display_hours() == "04:00"
        assert not json_store.load().is_started("alice")

    def test_end_raises_without_start(self, hours_data, json_store):
        with pytest.raises(NotFoundError):
            SessionService(hours_data, json_store).end("alice")

    def test_toggle_reports_store_failure(self, hours_data, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        service = SessionService(hours_data, JsonStore(blocker / "data"))

        result = service.toggle("alice")
        assert not result.success
        assert result.action == "start"
        assert "Failed to save" in result.error
        # memory is not rolled back
        assert hours_data.is_started("alice")

    def test_start_propagates_store_error(self, hours_data, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StoreError):
            SessionService(hours_data, JsonStore(blocker / "data")).start("alice")


class TestAdminSession:
    def test_inactive_by_default(self, clock):
        admin = AdminSession(clock)
        assert not admin.is_active()
        assert admin.remaining() == 0
        with pytest.raises(AdminSessionError):
            admin.require()

    def test_expires_after_timeout(self, clock):
        admin = AdminSession(clock, timeout_seconds=600)
        admin.login()
        clock.advance(minutes=9, seconds=59)
        assert admin.is_active()
        assert admin.remaining() == 1
        clock.advance(seconds=1)
        assert not admin.is_active()

    def test_touch_extends(self, clock):
        admin = AdminSession(clock, timeout_seconds=60)
        admin.login()
        clock.advance(seconds=50)
        admin.touch()
        clock.advance(seconds=50)
        assert admin.is_active()

    def test_logout(self, clock):
        admin = AdminSession(clock)
        admin.login()
        admin.logout()
        assert not admin.is_active()

    def test_password(self, clock):
        admin = AdminSession(clock, password="s3cret")
        with pytest.raises(AdminSessionError):
            admin.login("wrong")
        with pytest.raises(AdminSessionError):
            admin.login()
        admin.login("s3cret")
        admin.require()
