"""
API tests for the client lease endpoints.

The FastAPI app is driven through ``httpx.ASGITransport`` with the services
overridden by in-memory collaborators.
"""

from datetime import datetime, timedelta

import httpx
import pytest

from lease_server.interfaces.http.deps import get_device_service, get_lease_service
from lease_server.main import create_app

from tests.fakes import T0


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
async def client(lease_service, device_service):
    app = create_app()
    app.dependency_overrides[get_lease_service] = lambda: lease_service
    app.dependency_overrides[get_device_service] = lambda: device_service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_returns_updated_device(client, repository):
    repository.seed("D1", assigned_port=2201)

    response = await client.post(
        "/api/client/register/D1",
        json={"memory": "2GB", "diskSpace": 32, "internetSpeed": "50Mbps"},
    )

    assert response.status_code == 200
    device = response.json()["device"]
    assert device["id"] == "D1"
    assert device["memory"] == "2GB"
    assert device["diskSpace"] == "32"
    assert device["internetSpeed"] == "50Mbps"
    assert device["listingId"] == "listing-1"
    assert _parse(device["checkinTimeStamp"]) == T0
    assert _parse(device["expiration"]) == T0 + timedelta(days=1)
    assert "assignedPort" not in device
    assert "accessPassword" not in device


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_without_body(client, repository):
    repository.seed("D1")

    response = await client.post("/api/client/register/D1")

    assert response.status_code == 200
    assert response.json()["device"]["memory"] is None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_unknown_device_is_404(client):
    response = await client.post("/api/client/register/56bd1da600a526986cf65c80", json={})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_missing_private_data_is_404(client, repository):
    repository.seed("D1", with_private_data=False)

    response = await client.post("/api/client/register/D1", json={})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_register_dependency_failure_is_opaque_500(client, repository, port_allocator):
    repository.seed("D1")
    port_allocator.fail_request = True

    response = await client.post("/api/client/register/D1", json={})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_check_in(client, repository):
    repository.seed("D1")

    first = await client.get("/api/client/checkin/D1")
    second = await client.get("/api/client/checkin/D1")

    assert first.status_code == 200
    assert first.json() == second.json() == {"success": True}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_check_in_unknown_device_is_404(client):
    response = await client.get("/api/client/checkin/missing")

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_check_in_store_failure_is_opaque_500(client, repository):
    repository.seed("D1")
    repository.fail_device_save = True

    response = await client.get("/api/client/checkin/D1")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_expiration_teardown_failure_is_opaque_500(client, repository, listing_publisher, clock):
    repository.seed("D1")
    await client.post("/api/client/register/D1", json={})
    listing_publisher.fail_remove = True

    clock.advance(timedelta(days=2))
    response = await client.get("/api/client/expiration/D1")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert repository.devices["D1"].listing_id == "listing-1"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_expiration_after_registration(client, repository, listing_publisher, clock):
    repository.seed("D1")
    await client.post("/api/client/register/D1", json={})

    response = await client.get("/api/client/expiration/D1")
    assert response.status_code == 200
    assert _parse(response.json()["expiration"]) == T0 + timedelta(days=1)

    clock.advance(timedelta(days=2))
    response = await client.get("/api/client/expiration/D1")
    assert response.status_code == 200
    assert _parse(response.json()["expiration"]) == T0 + timedelta(days=1)
    assert repository.devices["D1"].listing_id is None


@pytest.mark.asyncio
@pytest.mark.integration
async def test_expiration_of_unregistered_device_is_null(client, repository):
    repository.seed("D1")

    response = await client.get("/api/client/expiration/D1")

    assert response.status_code == 200
    assert response.json() == {"expiration": None}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_expiration_unknown_device_is_404(client):
    response = await client.get("/api/client/expiration/missing")

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_device_hides_private_data(client, repository):
    repository.seed("D1", assigned_port=2201)

    response = await client.get("/api/devices/D1")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "D1"
    assert body["deviceName"] == "D1-name"
    assert "assignedPort" not in body


@pytest.mark.asyncio
@pytest.mark.integration
async def test_get_unknown_device_is_404(client):
    response = await client.get("/api/devices/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Could not find that device."}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["leaseDurationSeconds"] == 86400
    assert body["checkinIntervalSeconds"] == 120
