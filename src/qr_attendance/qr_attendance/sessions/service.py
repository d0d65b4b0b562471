from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_utc, to_iso
from ..common.validators import clean
from ..core.exceptions import AuthorizationError
from .model import INACTIVE, ActiveSession
from .repository import ActiveSessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    """Controls which session code, if any, is currently active.

    Switching codes never touches the attendance ledger: a previous session
    keeps accepting check-ins if its code is used again.
    """

    def __init__(self, active: ActiveSessionRepository):
        self._active = active

    def get_active(self) -> ActiveSession:
        return self._active.get()

    def set_active(self, code: Optional[str], *, is_admin: bool, now: datetime | None = None) -> ActiveSession:
        if not is_admin:
            raise AuthorizationError("Admin login required")

        code = clean(code)
        pointer = ActiveSession(code=code, since=to_iso(now or now_utc())) if code else INACTIVE

        previous = self._active.get()
        self._active.save(pointer)
        if pointer.is_active:
            logger.info("Session %r activated (previous: %r)", pointer.code, previous.code)
        else:
            logger.info("Session %r stopped", previous.code)
        return pointer

    def stop(self, *, is_admin: bool) -> None:
        self.set_active("", is_admin=is_admin)
