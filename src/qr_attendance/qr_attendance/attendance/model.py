from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CheckInStatus


@dataclass(frozen=True)
class AttendanceMark:
    """One recorded check-in. Never modified once written."""

    device_token: str
    student_no: str
    name: str
    time: str

    def to_dict(self) -> dict:
        return {"deviceId": self.device_token, "time": self.time, "name": self.name, "studentNo": self.student_no}

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceMark":
        return cls(
            device_token=str(data.get("deviceId") or ""),
            student_no=str(data.get("studentNo") or "").strip(),
            name=str(data.get("name") or ""),
            time=str(data.get("time") or ""),
        )


@dataclass(frozen=True)
class CheckInResult:
    status: CheckInStatus
    code: str
    time: str
    student_no: str
    name: str

    @property
    def is_new(self) -> bool:
        return self.status == CheckInStatus.SUCCESS


@dataclass(frozen=True)
class SessionSummary:
    """Public view of a session: how many devices, tokens masked."""

    code: str
    count: int
    devices: list[str]
