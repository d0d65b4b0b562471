from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceMark
from ..attendance.repository import AttendanceRepository
from ..common.session_codes import course_key
from ..roster.model import RosterEntry
from .model import Matrix, MatrixRow
from .reconciler import first_mark_by_student


def _chronological_key(item: tuple[str, Sequence[AttendanceMark]]) -> tuple[str, str]:
    # Sessions without marks have no first timestamp and sort first; the code breaks ties.
    code, marks = item
    first_time = marks[0].time if marks else ""
    return first_time, code


class MatrixAggregator:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def matrix(self, course: Optional[str], roster: Sequence[RosterEntry]) -> Matrix:
        key = course_key(course)
        sessions = []
        if key:
            sessions = [(code, marks) for code, marks in self._attendance.list_sessions() if course_key(code) == key]
        sessions.sort(key=_chronological_key)

        lookups = [first_mark_by_student(marks) for _, marks in sessions]

        rows = [
            MatrixRow(
                student_no=entry.student_no,
                name=entry.name,
                per_session=[entry.student_no.strip() in lookup for lookup in lookups],
            )
            for entry in roster
        ]

        enrolled = {entry.student_no.strip() for entry in roster}
        extra_names: dict[str, str] = {}
        for _, marks in sessions:
            for m in marks:
                if m.student_no and m.student_no not in enrolled and m.student_no not in extra_names:
                    extra_names[m.student_no] = m.name

        extras = [
            MatrixRow(
                student_no=student_no,
                name=name,
                per_session=[student_no in lookup for lookup in lookups],
            )
            for student_no, name in extra_names.items()
        ]

        return Matrix(course=key, session_codes=[code for code, _ in sessions], rows=rows, extras=extras)
