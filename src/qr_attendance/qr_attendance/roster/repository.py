from __future__ import annotations

from typing import Protocol, Sequence

from ..core.constants import ROSTER_KEY
from ..core.enums import Collection
from ..storage.store import KeyValueStore
from .model import RosterEntry


class RosterRepository(Protocol):
    def list_entries(self) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def replace(self, entries: Sequence[RosterEntry]) -> None:
        raise NotImplementedError


class KVRosterRepository(RosterRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def list_entries(self) -> Sequence[RosterEntry]:
        value = self._store.get(Collection.ROSTER, ROSTER_KEY) or []
        return [RosterEntry.from_dict(d) for d in value if isinstance(d, dict)]

    def replace(self, entries: Sequence[RosterEntry]) -> None:
        self._store.put(Collection.ROSTER, ROSTER_KEY, [e.to_dict() for e in entries])
