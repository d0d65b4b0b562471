from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_utc, to_iso
from ..common.validators import clean
from ..core.exceptions import StorageError, ValidationError
from .model import DeviceIdentity
from .repository import DeviceRepository

logger = logging.getLogger(__name__)


class DeviceRegistryService:
    """Remembers which student last used each device.

    Policy: full overwrite. A call carrying only one non-empty field replaces
    both stored fields; a call with both fields empty changes nothing.
    """

    def __init__(self, devices: DeviceRepository):
        self._devices = devices

    def lookup(self, device_token: Optional[str]) -> Optional[DeviceIdentity]:
        token = clean(device_token)
        if not token:
            return None
        return self._devices.get(token)

    def upsert(
        self,
        device_token: str,
        student_no: Optional[str],
        name: Optional[str],
        *,
        now: datetime | None = None,
    ) -> None:
        token = clean(device_token)
        student_no = clean(student_no)
        name = clean(name)
        if not token or (not student_no and not name):
            return

        changed = self._devices.save(
            DeviceIdentity(
                device_token=token,
                student_no=student_no,
                name=name,
                updated_at=to_iso(now or now_utc()),
            )
        )
        if changed:
            logger.debug("Device %s bound to studentNo=%s", token[:8], student_no)

    def register(self, device_token: Optional[str], student_no: Optional[str], name: Optional[str]) -> DeviceIdentity:
        token = clean(device_token)
        if not token:
            raise ValidationError("Device cookie is missing")
        if not clean(student_no) and not clean(name):
            raise ValidationError("name or studentNo is required")

        self.upsert(token, student_no, name)
        identity = self._devices.get(token)
        if identity is None:
            raise StorageError(f"Device {token[:8]} was not saved")
        return identity
