from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.qr_attendance.qr_attendance.core.enums import CheckInStatus
from src.qr_attendance.qr_attendance.core.exceptions import AuthorizationError
from src.qr_attendance.qr_attendance.sessions.model import INACTIVE


def test_inactive_by_default(container):
    assert container.session_service.get_active() == INACTIVE
    assert container.session_service.get_active().to_dict() == {"code": "", "since": ""}


def test_set_active_trims_and_records_since(container):
    now = datetime(2025, 3, 4, 9, 0, tzinfo=timezone.utc)

    pointer = container.session_service.set_active("  ybs311 week-1 ", is_admin=True, now=now)

    assert pointer.code == "ybs311 week-1"
    assert pointer.since == "2025-03-04T09:00:00.000Z"
    assert container.session_service.get_active() == pointer


def test_non_admin_cannot_change_active_session(container):
    with pytest.raises(AuthorizationError):
        container.session_service.set_active("X", is_admin=False)
    with pytest.raises(AuthorizationError):
        container.session_service.stop(is_admin=False)

    assert container.session_service.get_active() == INACTIVE


def test_switching_overwrites_previous_code(container):
    container.session_service.set_active("A", is_admin=True)
    container.session_service.set_active("B", is_admin=True)

    assert container.session_service.get_active().code == "B"


def test_stop_keeps_ledger_and_late_check_in_still_succeeds(container):
    svc = container.session_service
    svc.set_active("X", is_admin=True)
    container.attendance_service.check_in("X", "dev1", "100", "A")

    svc.set_active("", is_admin=True)

    assert svc.get_active() == INACTIVE
    assert container.attendance_service.count("X") == 1
    late = container.attendance_service.check_in("X", "dev2", "200", "B")
    assert late.status == CheckInStatus.SUCCESS
    assert container.attendance_service.count("X") == 2
