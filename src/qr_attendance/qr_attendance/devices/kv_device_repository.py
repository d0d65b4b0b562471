from __future__ import annotations

from typing import Optional

from ..core.enums import Collection
from ..storage.store import KeyValueStore
from .model import DeviceIdentity
from .repository import DeviceRepository


class KVDeviceRepository(DeviceRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, device_token: str) -> Optional[DeviceIdentity]:
        data = self._store.get(Collection.DEVICES, device_token)
        if not data:
            return None
        return DeviceIdentity.from_dict(device_token, data)

    def save(self, identity: DeviceIdentity) -> bool:
        def apply(current):
            if current:
                stored = DeviceIdentity.from_dict(identity.device_token, current)
                if (stored.student_no, stored.name) == (identity.student_no, identity.name):
                    return current, False
            return identity.to_dict(), True

        return self._store.mutate(Collection.DEVICES, identity.device_token, apply)
