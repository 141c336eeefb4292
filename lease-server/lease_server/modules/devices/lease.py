"""Domain service orchestrating the device lease lifecycle.

A lease is renewed by ``register``: the device gets a fresh expiration, a new
SSH port with new credentials and a new marketplace listing. ``check_in`` only
records liveness. ``get_expiration`` reports the lease end and unpublishes the
listing once the lease has run out; ports are reclaimed on the next
registration, never here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from lease_server.db.models import Device as DeviceModel
from lease_server.infrastructure.database.repositories.device_repository import SqlDeviceRepository

from .exceptions import DeviceNotFoundError, PrivateDataNotFoundError
from .locks import DeviceLockRegistry
from .models import CapacityUpdate, Device, ListingRemoval, utcnow
from .repository import DeviceRepository, ListingPublisher, PortAllocator

logger = logging.getLogger(__name__)

DEFAULT_LEASE_DURATION = timedelta(days=1)


@dataclass(slots=True)
class LeaseService:
    repository: DeviceRepository
    port_allocator: PortAllocator
    listing_publisher: ListingPublisher
    locks: DeviceLockRegistry = field(default_factory=DeviceLockRegistry)
    lease_duration: timedelta = DEFAULT_LEASE_DURATION
    clock: Callable[[], datetime] = utcnow

    @classmethod
    def with_session(
        cls,
        session: AsyncSession,
        *,
        port_allocator: PortAllocator,
        listing_publisher: ListingPublisher,
        locks: DeviceLockRegistry,
        lease_duration: timedelta = DEFAULT_LEASE_DURATION,
    ) -> "LeaseService":
        return cls(
            SqlDeviceRepository(session),
            port_allocator,
            listing_publisher,
            locks=locks,
            lease_duration=lease_duration,
        )

    async def register(self, device_id: str, capacity: Optional[CapacityUpdate] = None) -> Device:
        """Renew the lease of ``device_id`` and republish it on the marketplace.

        The steps run in a fixed order under the device lock:

        1. ``_renew_lease`` merges capacity stats and resets the lease window.
        2. ``_rotate_credentials`` requests a new port, stores it, and only then
           releases the previous port, so the allocator can never hand the
           still-assigned port to another device.
        3. ``_publish_listing`` creates a listing from the current attributes
           and records its id.

        Raises ``DeviceNotFoundError`` (or ``PrivateDataNotFoundError``) when a
        record is missing; collaborator failures propagate unchanged.
        """
        async with self.locks.hold(device_id):
            model = await self._renew_lease(device_id, capacity or CapacityUpdate())
            await self._rotate_credentials(device_id)
            model = await self._publish_listing(model)
            logger.info("Device %s registered until %s", device_id, model.expiration)
            return self._to_domain(model)

    async def check_in(self, device_id: str) -> Device:
        model = await self._require_device(device_id)
        model.checkin_timestamp = self.clock()
        model = await self.repository.save(model)
        return self._to_domain(model)

    async def get_expiration(self, device_id: str) -> Optional[datetime]:
        """Return the lease expiration, unpublishing the listing once it has passed."""
        device = self._to_domain(await self._require_device(device_id))
        if not device.is_expired(self.clock()):
            return device.expiration

        async with self.locks.hold(device_id):
            # A registration may have renewed the lease while we waited.
            model = await self._require_device(device_id)
            device = self._to_domain(model)
            if device.is_expired(self.clock()):
                await self._tear_down_listing(model, device)
            return device.expiration

    async def _renew_lease(self, device_id: str, capacity: CapacityUpdate) -> DeviceModel:
        model = await self._require_device(device_id)
        capacity.apply_to(model)

        now = self.clock()
        model.expiration = now + self.lease_duration
        model.checkin_timestamp = now
        logger.debug("Lease for device %s renewed until %s", device_id, model.expiration)
        return await self.repository.save(model)

    async def _rotate_credentials(self, device_id: str) -> None:
        private_data = await self.repository.get_private_data(device_id)
        if private_data is None:
            raise PrivateDataNotFoundError(
                "Could not find private data model associated with the device."
            )

        previous_port = private_data.assigned_port
        assignment = await self.port_allocator.request_port()
        logger.debug("Device %s assigned port %s", device_id, assignment.port)

        private_data.assigned_port = assignment.port
        private_data.access_username = assignment.username
        private_data.access_password = assignment.password
        try:
            await self.repository.save_private_data(private_data)
        except Exception:
            # The new port was never recorded: hand it back, keep the old one.
            await self._release_unrecorded_port(device_id, assignment.port)
            raise

        # Allocators never re-issue a held port; guard anyway so the live port stays.
        if previous_port is not None and previous_port != assignment.port:
            await self.port_allocator.release_port(previous_port)
            logger.debug("Device %s released port %s", device_id, previous_port)

    async def _publish_listing(self, model: DeviceModel) -> DeviceModel:
        listing_id = await self.listing_publisher.create_listing(self._to_domain(model))
        model.listing_id = str(listing_id)
        return await self.repository.save(model)

    async def _tear_down_listing(self, model: DeviceModel, device: Device) -> None:
        logger.info("Removing listing for %s", device.id)
        outcome = await self.listing_publisher.remove_listing(device)
        if outcome is ListingRemoval.NOT_FOUND:
            logger.warning("Listing for %s could not be found. Skipping removal.", device.id)
        else:
            logger.info("Listing for %s successfully removed.", device.id)

        if model.listing_id is not None:
            model.listing_id = None
            await self.repository.save(model)

    async def _release_unrecorded_port(self, device_id: str, port: int) -> None:
        try:
            await self.port_allocator.release_port(port)
        except Exception:
            logger.exception("Failed to hand back unrecorded port %s for device %s", port, device_id)

    async def _require_device(self, device_id: str) -> DeviceModel:
        model = await self.repository.get_by_id(device_id)
        if model is None:
            raise DeviceNotFoundError("Could not find that device.")
        return model

    @staticmethod
    def _to_domain(model: DeviceModel) -> Device:
        return Device.from_orm(model)


__all__ = ["DEFAULT_LEASE_DURATION", "LeaseService"]
