"""HTTP client publishing device listings on the marketplace store."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lease_server.core.config import MarketplaceSettings
from lease_server.modules.devices.exceptions import ListingPublisherError
from lease_server.modules.devices.models import Device, ListingRemoval

logger = logging.getLogger(__name__)


def build_listing_payload(device: Device) -> dict[str, Any]:
    return {
        "deviceId": device.id,
        "title": device.device_name or f"Device {device.id}",
        "memory": device.memory,
        "diskSpace": device.disk_space,
        "processor": device.processor,
        "internetSpeed": device.internet_speed,
        "expiration": device.expiration.isoformat() if device.expiration else None,
    }


class HttpListingPublisher:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: MarketplaceSettings) -> "HttpListingPublisher":
        return cls(httpx.AsyncClient(base_url=settings.base_url, timeout=settings.timeout))

    async def create_listing(self, device: Device) -> str:
        """Publish ``device`` and return the new listing id.

        A listing left over from a previous lease is removed first, so the
        marketplace never shows stale capacity or expiration data.
        """
        if device.listing_id:
            await self.remove_listing(device)

        try:
            response = await self._client.post("/listings", json=build_listing_payload(device))
            response.raise_for_status()
            listing_id = response.json()["id"]
        except httpx.HTTPError as exc:
            raise ListingPublisherError(f"Creating listing for {device.id} failed: {exc}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise ListingPublisherError(f"Malformed listing response for {device.id}: {exc}") from exc

        logger.debug("Listing %s created for device %s", listing_id, device.id)
        return str(listing_id)

    async def remove_listing(self, device: Device) -> ListingRemoval:
        if not device.listing_id:
            return ListingRemoval.NOT_FOUND

        try:
            response = await self._client.delete(f"/listings/{device.listing_id}")
            if response.status_code == httpx.codes.NOT_FOUND:
                return ListingRemoval.NOT_FOUND
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ListingPublisherError(
                f"Removing listing {device.listing_id} for {device.id} failed: {exc}"
            ) from exc
        return ListingRemoval.REMOVED

    async def aclose(self) -> None:
        await self._client.aclose()
