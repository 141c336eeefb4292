"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from functools import lru_cache

from lease_server.core.config import Settings, get_settings
from lease_server.infrastructure.clients import HttpListingPublisher, HttpPortAllocator
from lease_server.infrastructure.database.session import get_engine
from lease_server.modules.devices.locks import DeviceLockRegistry


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    port_allocator: HttpPortAllocator
    listing_publisher: HttpListingPublisher
    device_locks: DeviceLockRegistry = field(default_factory=DeviceLockRegistry)

    @property
    def lease_duration(self) -> timedelta:
        return timedelta(seconds=self.settings.lease_duration_seconds)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        get_engine()

    async def aclose(self) -> None:
        await self.port_allocator.aclose()
        await self.listing_publisher.aclose()


@lru_cache()
def get_container() -> ApplicationContainer:
    settings = get_settings()
    container = ApplicationContainer(
        settings=settings,
        port_allocator=HttpPortAllocator.from_settings(settings.port_allocator),
        listing_publisher=HttpListingPublisher.from_settings(settings.marketplace),
    )
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "get_container"]
