"""Protocols for the collaborators the lease workflows depend on."""

from __future__ import annotations

from typing import Protocol

from lease_server.db.models import Device as DeviceModel, DevicePrivateData as DevicePrivateDataModel

from .models import Device, ListingRemoval, PortAssignment


class DeviceRepository(Protocol):
    async def get_by_id(self, device_id: str) -> DeviceModel | None:
        ...

    async def get_private_data(self, device_id: str) -> DevicePrivateDataModel | None:
        ...

    async def save(self, model: DeviceModel) -> DeviceModel:
        ...

    async def save_private_data(self, model: DevicePrivateDataModel) -> DevicePrivateDataModel:
        ...

    async def create_device(self, *, device_id: str, device_name: str | None) -> DeviceModel:
        ...


class PortAllocator(Protocol):
    async def request_port(self) -> PortAssignment:
        ...

    async def release_port(self, port: int) -> None:
        ...


class ListingPublisher(Protocol):
    async def create_listing(self, device: Device) -> str:
        """Publish a listing for ``device``, superseding any previous one."""
        ...

    async def remove_listing(self, device: Device) -> ListingRemoval:
        ...
