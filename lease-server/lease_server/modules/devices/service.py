"""Domain service for provisioning and looking up devices."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from lease_server.infrastructure.database.repositories.device_repository import SqlDeviceRepository
from lease_server.db.models import Device as DeviceModel, generate_uuid

from .exceptions import DeviceNotFoundError
from .models import Device
from .repository import DeviceRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeviceService:
    repository: DeviceRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "DeviceService":
        return cls(SqlDeviceRepository(session))

    async def provision_device(
        self,
        *,
        device_id: Optional[str] = None,
        device_name: Optional[str] = None,
    ) -> Device:
        """Create the linked public and private records of a new device."""
        device_id = device_id or generate_uuid()
        model = await self.repository.create_device(device_id=device_id, device_name=device_name)
        logger.info("Provisioned device %s (%s)", device_id, device_name or "unnamed")
        return self._to_domain(model)

    async def get_device(self, device_id: str) -> Device | None:
        model = await self.repository.get_by_id(device_id)
        return self._to_domain(model) if model else None

    async def require_device(self, device_id: str) -> Device:
        device = await self.get_device(device_id)
        if device is None:
            raise DeviceNotFoundError("Could not find that device.")
        return device

    @staticmethod
    def _to_domain(model: DeviceModel) -> Device:
        return Device.from_orm(model)
