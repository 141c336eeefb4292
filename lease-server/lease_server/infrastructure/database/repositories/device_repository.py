"""SQLAlchemy powered repository for device persistence."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lease_server.db.models import Device as DeviceModel, DevicePrivateData as DevicePrivateDataModel


class SqlDeviceRepository:
    """Stores the public and private halves of a device.

    Writes are committed immediately: the lease workflow relies on a new port
    assignment being durable before the previous one is released.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, device_id: str) -> DeviceModel | None:
        stmt = (
            select(DeviceModel)
            .where(DeviceModel.id == device_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_private_data(self, device_id: str) -> DevicePrivateDataModel | None:
        stmt = select(DevicePrivateDataModel).where(DevicePrivateDataModel.device_id == device_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, model: DeviceModel) -> DeviceModel:
        return await self._persist(model)

    async def save_private_data(self, model: DevicePrivateDataModel) -> DevicePrivateDataModel:
        return await self._persist(model)

    async def create_device(
        self,
        *,
        device_id: str,
        device_name: Optional[str],
    ) -> DeviceModel:
        model = DeviceModel(id=device_id, device_name=device_name)
        private_data = DevicePrivateDataModel(device_id=device_id)
        self._session.add(model)
        self._session.add(private_data)
        await self._session.flush()
        await self._session.commit()
        await self._session.refresh(model)
        return model

    async def _persist(self, model):
        self._session.add(model)
        await self._session.flush()
        await self._session.commit()
        await self._session.refresh(model)
        return model
