from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..core.exceptions import AuthorizationError, StorageError, ValidationError
from .model import RosterEntry
from .parser import parse_roster_csv
from .repository import RosterRepository

logger = logging.getLogger(__name__)


class RosterService:
    def __init__(self, roster: RosterRepository):
        self._roster = roster

    def get_roster(self) -> Sequence[RosterEntry]:
        return list(self._roster.list_entries())

    def import_csv(self, text: str, *, is_admin: bool) -> int:
        if not is_admin:
            raise AuthorizationError("Admin login required")
        entries = parse_roster_csv(text)
        if not entries:
            raise ValidationError("Roster file has no students")
        self._roster.replace(entries)
        logger.info("Roster replaced (%d students)", len(entries))
        return len(entries)

    def seed_from_file(self, path: str | Path) -> int:
        """Import ``path`` when no roster is stored yet. Returns the number imported."""
        path = Path(path)
        if self._roster.list_entries() or not path.exists():
            return 0
        try:
            text = path.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise StorageError(f"Cannot read {path.name}") from e
        entries = parse_roster_csv(text)
        self._roster.replace(entries)
        logger.info("Roster seeded from %s (%d students)", path, len(entries))
        return len(entries)
