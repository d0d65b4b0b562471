from __future__ import annotations

import hmac

from ..core.exceptions import AuthorizationError


class AdminAuthService:
    """Single shared admin credential taken from settings."""

    def __init__(self, *, username: str, password: str):
        self._username = username
        self._password = password

    def login(self, username: str, password: str) -> None:
        user_ok = hmac.compare_digest((username or "").encode(), self._username.encode())
        pass_ok = hmac.compare_digest((password or "").encode(), self._password.encode())
        if not (user_ok and pass_ok):
            raise AuthorizationError("Wrong username or password")
