"""Unit tests for device provisioning and lookup."""

import pytest

from lease_server.modules.devices import DeviceNotFoundError


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provision_device_creates_both_records(device_service, repository):
    device = await device_service.provision_device(device_name="pi-one")

    assert device.device_name == "pi-one"
    assert device.expiration is None
    assert device.listing_id is None
    assert repository.private_data[device.id].device_id == device.id


@pytest.mark.asyncio
@pytest.mark.unit
async def test_provision_device_honours_fixed_id(device_service):
    device = await device_service.provision_device(device_id="D1")

    assert device.id == "D1"


@pytest.mark.asyncio
@pytest.mark.unit
async def test_get_device(device_service, repository):
    repository.seed("D1")

    assert (await device_service.get_device("D1")).id == "D1"
    assert await device_service.get_device("missing") is None


@pytest.mark.asyncio
@pytest.mark.unit
async def test_require_device_raises_for_unknown_id(device_service):
    with pytest.raises(DeviceNotFoundError):
        await device_service.require_device("missing")
