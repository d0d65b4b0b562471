from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from ..core.enums import CheckInStatus
from .model import AttendanceMark


class AttendanceRepository(Protocol):
    def get_marks(self, code: str) -> Sequence[AttendanceMark]:
        """Marks of one session in insertion order (empty when unopened)."""

        raise NotImplementedError

    def list_sessions(self) -> Sequence[Tuple[str, Sequence[AttendanceMark]]]:
        raise NotImplementedError

    def append_if_absent(self, code: str, mark: AttendanceMark) -> Tuple[CheckInStatus, AttendanceMark]:
        """Atomically append ``mark`` unless its device already has a mark in ``code``.

        Returns the outcome and the mark that is now on record for the device.
        """

        raise NotImplementedError

    def delete(self, code: str) -> bool:
        raise NotImplementedError
