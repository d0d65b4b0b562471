from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.qr_attendance.qr_attendance.common.session_codes import course_key
from src.qr_attendance.qr_attendance.core.enums import Collection
from src.qr_attendance.qr_attendance.reports.matrix import MatrixAggregator
from src.qr_attendance.qr_attendance.roster.model import RosterEntry

T1 = datetime(2025, 3, 4, 9, 0, tzinfo=timezone.utc)
T2 = datetime(2025, 3, 11, 9, 0, tzinfo=timezone.utc)
T3 = datetime(2025, 3, 18, 9, 0, tzinfo=timezone.utc)

ROSTER = [RosterEntry("100", "A"), RosterEntry("200", "B")]


@pytest.mark.parametrize(
    "code, expected",
    [
        ("ybs311 week-4", "ybs311"),
        ("YBS311", "ybs311"),
        ("  Ybs311\tlab ", "ybs311"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_course_key(code, expected):
    assert course_key(code) == expected


def test_sessions_are_ordered_by_first_mark(container):
    svc = container.attendance_service
    svc.check_in("c 2", "dev1", "100", "A", now=T2)
    svc.check_in("c 1", "dev1", "100", "A", now=T1)

    matrix = MatrixAggregator(container.attendance_repo).matrix("c", ROSTER)

    assert matrix.session_codes == ["c 1", "c 2"]


def test_presence_cells_and_totals(container):
    svc = container.attendance_service
    svc.check_in("YBS311 w1", "dev1", "100", "A", now=T1)
    svc.check_in("ybs311 w2", "dev1", "100", "A", now=T2)
    svc.check_in("ybs311 w2", "dev2", "200", "B", now=T2)
    svc.check_in("ybs3110 w1", "dev2", "200", "B", now=T3)

    matrix = MatrixAggregator(container.attendance_repo).matrix("YBS311", ROSTER)

    assert matrix.course == "ybs311"
    assert matrix.session_codes == ["YBS311 w1", "ybs311 w2"]
    assert [(r.student_no, r.per_session, r.total) for r in matrix.rows] == [
        ("100", [True, True], 2),
        ("200", [False, True], 1),
    ]
    assert matrix.extras == []


def test_extras_in_first_seen_order(container):
    svc = container.attendance_service
    svc.check_in("c w2", "dev9", "900", "Late Z", now=T2)
    svc.check_in("c w2", "dev8", "800", "Y", now=T2)
    svc.check_in("c w1", "dev8", "800", "Y", now=T1)

    matrix = MatrixAggregator(container.attendance_repo).matrix("c", ROSTER)

    assert matrix.session_codes == ["c w1", "c w2"]
    assert [(e.student_no, e.name, e.per_session, e.total) for e in matrix.extras] == [
        ("800", "Y", [True, True], 2),
        ("900", "Late Z", [False, True], 1),
    ]


def test_empty_session_sorts_first(container, store):
    container.attendance_service.check_in("c w1", "dev1", "100", "A", now=T1)

    store.put(Collection.ATTENDANCE, "c empty", [])

    matrix = MatrixAggregator(container.attendance_repo).matrix("c", ROSTER)

    assert matrix.session_codes == ["c empty", "c w1"]
    assert matrix.rows[0].per_session == [False, True]


def test_unknown_course_returns_empty_matrix(container):
    matrix = MatrixAggregator(container.attendance_repo).matrix("nothing", ROSTER)

    assert matrix.session_codes == []
    assert [(r.student_no, r.per_session, r.total) for r in matrix.rows] == [("100", [], 0), ("200", [], 0)]
    assert matrix.to_dict()["sessionCodes"] == []
