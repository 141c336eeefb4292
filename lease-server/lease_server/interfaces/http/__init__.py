"""HTTP interface: routers and dependencies."""

from fastapi import APIRouter

from lease_server.interfaces.http.routers import client, devices, health


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router, tags=["health"])
    router.include_router(client.router, prefix="/client", tags=["client"])
    router.include_router(devices.router, prefix="/devices", tags=["devices"])
    return router


__all__ = [
    "create_api_router",
]
