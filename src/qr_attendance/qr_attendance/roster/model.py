from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RosterEntry:
    """One enrolled student. studentNo is the only matching key."""

    student_no: str
    name: str

    def to_dict(self) -> dict:
        return {"studentNo": self.student_no, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "RosterEntry":
        return cls(student_no=str(data.get("studentNo") or "").strip(), name=str(data.get("name") or "").strip())
