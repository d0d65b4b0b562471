from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ActiveSession:
    """Pointer to the session code currently taking attendance."""

    code: str = ""
    since: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.code)

    def to_dict(self) -> dict:
        return {"code": self.code, "since": self.since}

    @classmethod
    def from_dict(cls, data: dict | None) -> "ActiveSession":
        if not data:
            return INACTIVE
        return cls(code=str(data.get("code") or ""), since=str(data.get("since") or ""))


INACTIVE = ActiveSession()
