from __future__ import annotations

from typing import Optional, Protocol

from .model import DeviceIdentity


class DeviceRepository(Protocol):
    def get(self, device_token: str) -> Optional[DeviceIdentity]:
        raise NotImplementedError

    def save(self, identity: DeviceIdentity) -> bool:
        """Overwrite the record for ``identity.device_token``.

        Returns False (and keeps the stored record, timestamp included) when
        the stored studentNo and name already equal the new ones.
        """

        raise NotImplementedError
