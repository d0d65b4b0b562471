from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..attendance.model import AttendanceMark
from ..attendance.repository import AttendanceRepository
from ..common.validators import clean
from ..roster.model import RosterEntry
from .model import Reconciliation, ReconciliationRow


def first_mark_by_student(marks: Sequence[AttendanceMark]) -> Mapping[str, AttendanceMark]:
    """studentNo -> earliest-inserted mark carrying it.

    Two devices may submit the same studentNo; the device is the dedup unit,
    so the first mark wins.
    """
    out: dict[str, AttendanceMark] = {}
    for m in marks:
        if m.student_no:
            out.setdefault(m.student_no, m)
    return out


class RosterReconciler:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def reconcile(self, code: Optional[str], roster: Sequence[RosterEntry]) -> Reconciliation:
        """Presence of every roster entry in session ``code``, in roster order.

        Marks whose studentNo is not on the roster are left out here; they
        stay visible in the raw ledger export. An unknown code yields an
        all-absent result.
        """
        code = clean(code)
        marks = self._attendance.get_marks(code) if code else []
        by_student = first_mark_by_student(marks)

        rows: list[ReconciliationRow] = []
        for entry in roster:
            mark = by_student.get(entry.student_no.strip())
            rows.append(
                ReconciliationRow(
                    student_no=entry.student_no,
                    name=entry.name,
                    present=mark is not None,
                    time=mark.time if mark else None,
                )
            )

        present_count = sum(1 for r in rows if r.present)
        return Reconciliation(code=code, total=len(roster), present_count=present_count, rows=rows)
