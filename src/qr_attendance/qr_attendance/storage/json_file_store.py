from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.enums import Collection
from ..core.exceptions import StorageError
from .store import KeyValueStore, Mutation, T

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """One JSON document per collection inside ``data_dir``.

    Writers hold the collection lock, build a new dict, atomically replace the
    file and only then publish the new dict as the read snapshot. Readers never
    take the lock: they see either the old or the new snapshot, never a mix.

    Note: locks are in-process; run a single worker process with this backend.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}
        self._snapshots: Dict[str, Dict[str, Any]] = {}

    @property
    def data_dir(self) -> Path:
        return self._dir

    def _path(self, collection: Collection) -> Path:
        return self._dir / f"{Collection(collection).value}.json"

    def _lock_for(self, collection: Collection) -> threading.Lock:
        name = Collection(collection).value
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def _load(self, collection: Collection) -> Dict[str, Any]:
        path = self._path(collection)
        try:
            if not path.exists():
                return {}
            text = path.read_text(encoding="utf-8")
            data = json.loads(text) if text.strip() else {}
        except (OSError, ValueError) as e:
            logger.error("Cannot read %s: %s", path, e)
            raise StorageError(f"Cannot read {path.name}") from e
        if not isinstance(data, dict):
            raise StorageError(f"{path.name} does not hold a JSON object")
        return data

    def _write(self, collection: Collection, data: Dict[str, Any]) -> None:
        path = self._path(collection)
        tmp_name = None
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.stem}-", suffix=".tmp", dir=str(self._dir))
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Cannot write %s: %s", path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write {path.name}") from e

    def _snapshot(self, collection: Collection) -> Dict[str, Any]:
        name = Collection(collection).value
        snap = self._snapshots.get(name)
        if snap is None:
            with self._lock_for(collection):
                snap = self._snapshots.get(name)
                if snap is None:
                    snap = self._snapshots[name] = self._load(collection)
        return snap

    def get(self, collection: Collection, key: str) -> Optional[Any]:
        return copy.deepcopy(self._snapshot(collection).get(key))

    def items(self, collection: Collection) -> Sequence[Tuple[str, Any]]:
        return [(k, copy.deepcopy(v)) for k, v in self._snapshot(collection).items()]

    def put(self, collection: Collection, key: str, value: Any) -> None:
        self.mutate(collection, key, lambda _current: (value, None))

    def delete(self, collection: Collection, key: str) -> bool:
        with self._lock_for(collection):
            snap = self._snapshot_locked(collection)
            if key not in snap:
                return False
            updated = {k: v for k, v in snap.items() if k != key}
            self._write(collection, updated)
            self._snapshots[Collection(collection).value] = updated
            return True

    def mutate(self, collection: Collection, key: str, fn: Mutation[T]) -> T:
        with self._lock_for(collection):
            snap = self._snapshot_locked(collection)
            current = copy.deepcopy(snap.get(key))
            new_value, outcome = fn(copy.deepcopy(current))
            if new_value == current:
                return outcome

            updated = dict(snap)
            updated[key] = copy.deepcopy(new_value)
            self._write(collection, updated)
            self._snapshots[Collection(collection).value] = updated
            return outcome

    def _snapshot_locked(self, collection: Collection) -> Dict[str, Any]:
        # Caller holds the collection lock (threading.Lock is not re-entrant).
        name = Collection(collection).value
        snap = self._snapshots.get(name)
        if snap is None:
            snap = self._snapshots[name] = self._load(collection)
        return snap
