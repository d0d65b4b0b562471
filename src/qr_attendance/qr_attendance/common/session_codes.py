from __future__ import annotations

from typing import Optional

from ..core.constants import MASK_VISIBLE_CHARS


def course_key(code: Optional[str]) -> str:
    """Course grouping key of a session code.

    The token before the first whitespace, lower-cased:
    ``"YBS311 week-4"`` -> ``"ybs311"``. Blank codes map to ``""``.
    """
    parts = (code or "").split()
    return parts[0].lower() if parts else ""


def mask_device(device_token: Optional[str]) -> str:
    token = device_token or ""
    if len(token) <= 2 * MASK_VISIBLE_CHARS:
        return token
    return f"{token[:MASK_VISIBLE_CHARS]}...{token[-MASK_VISIBLE_CHARS:]}"
