"""Device service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lease_server.core.container import ApplicationContainer, get_container
from lease_server.modules.devices import DeviceService, LeaseService

from .database import get_db_session


def get_device_service(db: AsyncSession = Depends(get_db_session)) -> DeviceService:
    return DeviceService.with_session(db)


def get_lease_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> LeaseService:
    return LeaseService.with_session(
        db,
        port_allocator=container.port_allocator,
        listing_publisher=container.listing_publisher,
        locks=container.device_locks,
        lease_duration=container.lease_duration,
    )


__all__ = [
    "get_device_service",
    "get_lease_service",
]
