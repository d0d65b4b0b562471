from __future__ import annotations

from typing import Protocol

from ..core.constants import ACTIVE_POINTER_KEY
from ..core.enums import Collection
from ..storage.store import KeyValueStore
from .model import ActiveSession


class ActiveSessionRepository(Protocol):
    def get(self) -> ActiveSession:
        raise NotImplementedError

    def save(self, pointer: ActiveSession) -> None:
        raise NotImplementedError


class KVActiveSessionRepository(ActiveSessionRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self) -> ActiveSession:
        return ActiveSession.from_dict(self._store.get(Collection.ACTIVE, ACTIVE_POINTER_KEY))

    def save(self, pointer: ActiveSession) -> None:
        self._store.put(Collection.ACTIVE, ACTIVE_POINTER_KEY, pointer.to_dict())
