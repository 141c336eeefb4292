"""HTTP client for the SSH port pool allocator."""

from __future__ import annotations

import logging

import httpx

from lease_server.core.config import PortAllocatorSettings
from lease_server.modules.devices.exceptions import PortAllocatorError
from lease_server.modules.devices.models import PortAssignment

logger = logging.getLogger(__name__)


class HttpPortAllocator:
    """Requests and releases SSH ports from the shared allocator service.

    The pool is owned by the allocator; this client keeps no bookkeeping of
    its own.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: PortAllocatorSettings) -> "HttpPortAllocator":
        return cls(httpx.AsyncClient(base_url=settings.base_url, timeout=settings.timeout))

    async def request_port(self) -> PortAssignment:
        try:
            response = await self._client.post("/ports")
            response.raise_for_status()
            payload = response.json()
            return PortAssignment(
                port=int(payload["port"]),
                username=str(payload["username"]),
                password=str(payload["password"]),
            )
        except httpx.HTTPError as exc:
            raise PortAllocatorError(f"Port request failed: {exc}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise PortAllocatorError(f"Malformed port assignment: {exc}") from exc

    async def release_port(self, port: int) -> None:
        try:
            response = await self._client.delete(f"/ports/{port}")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise PortAllocatorError(f"Releasing port {port} failed: {exc}") from exc
        logger.debug("Port %s released", port)

    async def aclose(self) -> None:
        await self._client.aclose()
