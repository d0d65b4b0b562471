from __future__ import annotations

from datetime import datetime, timezone

from src.qr_attendance.qr_attendance.reports.reconciler import RosterReconciler
from src.qr_attendance.qr_attendance.roster.model import RosterEntry

ROSTER = [RosterEntry("100", "A"), RosterEntry("200", "B")]


def test_scenario_extra_attendee_left_out_of_rows(container):
    container.attendance_service.check_in("X", "dev1", "100", "A")
    container.attendance_service.check_in("X", "dev2", "999", "Z")

    rec = RosterReconciler(container.attendance_repo).reconcile("X", ROSTER)

    assert rec.total == 2
    assert rec.present_count == 1
    assert [(r.student_no, r.present) for r in rec.rows] == [("100", True), ("200", False)]
    assert rec.rows[0].time is not None
    assert rec.rows[1].time is None
    assert "999" in [m.student_no for m in container.attendance_service.get_marks("X")]


def test_rows_follow_roster_order(container):
    roster = [RosterEntry("300", "C"), RosterEntry("100", "A"), RosterEntry("200", "B")]
    container.attendance_service.check_in("X", "dev1", "200", "B")
    container.attendance_service.check_in("X", "dev2", "300", "C")

    rec = RosterReconciler(container.attendance_repo).reconcile("X", roster)

    assert [r.student_no for r in rec.rows] == ["300", "100", "200"]
    assert [r.present for r in rec.rows] == [True, False, True]
    assert rec.absent_count == 1


def test_first_inserted_mark_wins_for_shared_student_no(container):
    t1 = datetime(2025, 3, 4, 9, 0, tzinfo=timezone.utc)
    t2 = datetime(2025, 3, 4, 9, 30, tzinfo=timezone.utc)
    container.attendance_service.check_in("X", "dev1", "100", "A", now=t1)
    container.attendance_service.check_in("X", "dev2", "100", "A's friend", now=t2)

    rec = RosterReconciler(container.attendance_repo).reconcile("X", ROSTER)

    assert rec.rows[0].time == "2025-03-04T09:00:00.000Z"
    assert rec.present_count == 1


def test_unknown_session_is_all_absent(container):
    rec = RosterReconciler(container.attendance_repo).reconcile("never-opened", ROSTER)

    assert rec.total == 2
    assert rec.present_count == 0
    assert all(not r.present for r in rec.rows)


def test_to_dict_shape(container):
    container.attendance_service.check_in("X", "dev1", "100", "A")

    data = RosterReconciler(container.attendance_repo).reconcile("X", ROSTER).to_dict()

    assert data["code"] == "X"
    assert data["presentCount"] == 1
    assert set(data["rows"][0]) == {"studentNo", "name", "present", "time"}
    assert set(data["rows"][1]) == {"studentNo", "name", "present"}
