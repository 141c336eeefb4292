"""Pytest fixtures shared by the lease server tests."""

from datetime import timedelta

import pytest

from lease_server.modules.devices import DeviceLockRegistry, DeviceService, LeaseService

from tests.fakes import (
    FakeClock,
    InMemoryDeviceRepository,
    RecordingListingPublisher,
    RecordingPortAllocator,
)

LEASE_DURATION = timedelta(milliseconds=86400000)


@pytest.fixture
def calls():
    return []


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repository(calls):
    return InMemoryDeviceRepository(calls)


@pytest.fixture
def port_allocator(calls):
    return RecordingPortAllocator(calls)


@pytest.fixture
def listing_publisher(calls):
    return RecordingListingPublisher(calls)


@pytest.fixture
def lease_service(repository, port_allocator, listing_publisher, clock):
    return LeaseService(
        repository,
        port_allocator,
        listing_publisher,
        locks=DeviceLockRegistry(),
        lease_duration=LEASE_DURATION,
        clock=clock,
    )


@pytest.fixture
def device_service(repository):
    return DeviceService(repository)
