from __future__ import annotations

from typing import Sequence, Tuple

from ..core.enums import CheckInStatus, Collection
from ..storage.store import KeyValueStore
from .model import AttendanceMark
from .repository import AttendanceRepository


def _as_marks(value) -> list[AttendanceMark]:
    if not isinstance(value, list):
        return []
    return [AttendanceMark.from_dict(m) for m in value if isinstance(m, dict)]


class KVAttendanceRepository(AttendanceRepository):
    """Session ledger: ``attendance[code]`` is the list of marks for that code."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_marks(self, code: str) -> Sequence[AttendanceMark]:
        return _as_marks(self._store.get(Collection.ATTENDANCE, code))

    def list_sessions(self) -> Sequence[Tuple[str, Sequence[AttendanceMark]]]:
        return [(code, _as_marks(value)) for code, value in self._store.items(Collection.ATTENDANCE)]

    def append_if_absent(self, code: str, mark: AttendanceMark) -> Tuple[CheckInStatus, AttendanceMark]:
        def apply(current):
            marks = current if isinstance(current, list) else []
            for existing in marks:
                if isinstance(existing, dict) and existing.get("deviceId") == mark.device_token:
                    return current, (CheckInStatus.ALREADY_CHECKED, AttendanceMark.from_dict(existing))
            return marks + [mark.to_dict()], (CheckInStatus.SUCCESS, mark)

        return self._store.mutate(Collection.ATTENDANCE, code, apply)

    def delete(self, code: str) -> bool:
        return self._store.delete(Collection.ATTENDANCE, code)
