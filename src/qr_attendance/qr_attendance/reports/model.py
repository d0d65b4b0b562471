from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ReconciliationRow:
    student_no: str
    name: str
    present: bool
    time: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"studentNo": self.student_no, "name": self.name, "present": self.present}
        if self.present:
            out["time"] = self.time
        return out


@dataclass(frozen=True)
class Reconciliation:
    """Roster-ordered presence for one session."""

    code: str
    total: int
    present_count: int
    rows: list[ReconciliationRow] = field(default_factory=list)

    @property
    def absent_count(self) -> int:
        return self.total - self.present_count

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "total": self.total,
            "presentCount": self.present_count,
            "rows": [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True)
class MatrixRow:
    student_no: str
    name: str
    per_session: list[bool]

    @property
    def total(self) -> int:
        return sum(1 for present in self.per_session if present)

    def to_dict(self) -> dict:
        return {
            "studentNo": self.student_no,
            "name": self.name,
            "perSession": list(self.per_session),
            "total": self.total,
        }


@dataclass(frozen=True)
class Matrix:
    """Student-by-session presence for every session of one course."""

    course: str
    session_codes: list[str]
    rows: list[MatrixRow]
    extras: list[MatrixRow]

    def to_dict(self) -> dict:
        return {
            "course": self.course,
            "sessionCodes": list(self.session_codes),
            "rows": [r.to_dict() for r in self.rows],
            "extras": [r.to_dict() for r in self.extras],
        }
