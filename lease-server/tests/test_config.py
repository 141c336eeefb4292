"""Tests for settings loading and service wiring."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from lease_server.core.config import Settings
from lease_server.core.container import ApplicationContainer
from lease_server.infrastructure.clients import HttpListingPublisher, HttpPortAllocator
from lease_server.interfaces.http.deps import get_lease_service


@pytest.mark.unit
def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.lease_duration_seconds == 60 * 60 * 24
    assert settings.lease.checkin_interval_seconds == 120
    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.api_prefix == "/api"


@pytest.mark.unit
def test_nested_environment_overrides(monkeypatch):
    monkeypatch.setenv("LEASE__DURATION_SECONDS", "3600")
    monkeypatch.setenv("PORT_ALLOCATOR__BASE_URL", "http://ports.internal")
    monkeypatch.setenv("MARKETPLACE__TIMEOUT", "2.5")
    monkeypatch.setenv("LOGGING__LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.lease_duration_seconds == 3600
    assert settings.port_allocator.base_url == "http://ports.internal"
    assert settings.marketplace.timeout == 2.5
    assert settings.log_level == "debug"


@pytest.mark.unit
def test_negative_lease_duration_is_rejected(monkeypatch):
    monkeypatch.setenv("LEASE__DURATION_SECONDS", "-1")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_lease_service_is_wired_from_container(monkeypatch):
    monkeypatch.setenv("LEASE__DURATION_SECONDS", "600")
    settings = Settings(_env_file=None)
    container = ApplicationContainer(
        settings=settings,
        port_allocator=HttpPortAllocator.from_settings(settings.port_allocator),
        listing_publisher=HttpListingPublisher.from_settings(settings.marketplace),
    )

    service = get_lease_service(db=MagicMock(), container=container)

    assert service.lease_duration == timedelta(seconds=600)
    assert service.locks is container.device_locks
    assert service.port_allocator is container.port_allocator
    assert service.listing_publisher is container.listing_publisher
    await container.aclose()
