from __future__ import annotations

from enum import Enum


class CheckInStatus(str, Enum):
    """Outcome of a check-in attempt (both values are successful responses)."""

    SUCCESS = "success"
    ALREADY_CHECKED = "already_checked"


class Collection(str, Enum):
    """Named collections held by the key-value store."""

    ATTENDANCE = "attendance"
    DEVICES = "devices"
    ACTIVE = "active"
    ROSTER = "roster"
