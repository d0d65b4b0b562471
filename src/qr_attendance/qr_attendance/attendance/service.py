from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.session_codes import mask_device
from ..common.validators import clean, require_non_empty
from ..core.enums import CheckInStatus
from ..core.exceptions import StorageError, ValidationError
from ..devices.service import DeviceRegistryService
from .model import AttendanceMark, CheckInResult, SessionSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Session ledger: at most one mark per device per session code.

    Sessions are never closed here; a check-in against any code is accepted
    as long as the device has no mark for that code yet.
    """

    def __init__(self, attendance: AttendanceRepository, devices: DeviceRegistryService):
        self._attendance = attendance
        self._devices = devices

    def check_in(
        self,
        code: Optional[str],
        device_token: Optional[str],
        student_no: Optional[str],
        name: Optional[str] = None,
        *,
        now: datetime | None = None,
    ) -> CheckInResult:
        token = clean(device_token)
        if not token:
            raise ValidationError("Device cookie is missing")
        code = require_non_empty(code, "code")

        student_no = clean(student_no)
        name = clean(name)
        if not student_no or not name:
            # Fill blanks from what this device told us last time.
            known = self._devices.lookup(token)
            if known:
                student_no = student_no or known.student_no
                name = name or known.name
        student_no = require_non_empty(student_no, "studentNo")

        mark = AttendanceMark(device_token=token, student_no=student_no, name=name, time=to_iso(now or now_utc()))
        status, recorded = self._attendance.append_if_absent(code, mark)

        if status == CheckInStatus.SUCCESS:
            logger.info("Check-in recorded: code=%r studentNo=%s", code, student_no)
        else:
            logger.debug("Duplicate check-in ignored: code=%r device=%s", code, mask_device(token))

        try:
            self._devices.upsert(token, student_no, name, now=now)
        except StorageError:
            # The ledger write is already committed; report the check-in as it stands.
            logger.exception("Device registry update failed after check-in (code=%r)", code)

        return CheckInResult(
            status=status,
            code=code,
            time=recorded.time,
            student_no=student_no,
            name=name,
        )

    def get_marks(self, code: Optional[str]) -> Sequence[AttendanceMark]:
        code = clean(code)
        if not code:
            return []
        return list(self._attendance.get_marks(code))

    def count(self, code: Optional[str]) -> int:
        return len(self.get_marks(code))

    def list_codes(self) -> list[str]:
        return [code for code, _ in self._attendance.list_sessions()]

    def summary(self, code: Optional[str]) -> SessionSummary:
        code = clean(code)
        marks = self.get_marks(code)
        return SessionSummary(code=code, count=len(marks), devices=[mask_device(m.device_token) for m in marks])

    def summary_all(self) -> list[dict]:
        return [{"code": code, "count": len(marks)} for code, marks in self._attendance.list_sessions()]

    def reset(self, code: Optional[str]) -> bool:
        """Drop a session's ledger (operational cleanup, admin only)."""
        code = require_non_empty(code, "code")
        removed = self._attendance.delete(code)
        if removed:
            logger.warning("Ledger for session %r was reset", code)
        return removed
