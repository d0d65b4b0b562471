from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceIdentity:
    """Last known student identity behind one device token."""

    device_token: str
    student_no: str
    name: str
    updated_at: str

    def to_dict(self) -> dict:
        return {"studentNo": self.student_no, "name": self.name, "updatedAt": self.updated_at}

    @classmethod
    def from_dict(cls, device_token: str, data: dict) -> "DeviceIdentity":
        return cls(
            device_token=device_token,
            student_no=str(data.get("studentNo") or ""),
            name=str(data.get("name") or ""),
            # Older device files used "registeredAt".
            updated_at=str(data.get("updatedAt") or data.get("registeredAt") or ""),
        )
