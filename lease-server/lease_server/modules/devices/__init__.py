"""Device provisioning and lease lifecycle."""

from .models import CapacityUpdate, Device, ListingRemoval, PortAssignment
from .lease import DEFAULT_LEASE_DURATION, LeaseService
from .locks import DeviceLockRegistry
from .service import DeviceService
from .exceptions import (
    DependencyError,
    DeviceError,
    DeviceNotFoundError,
    ListingPublisherError,
    PortAllocatorError,
    PrivateDataNotFoundError,
)

__all__ = [
    "CapacityUpdate",
    "Device",
    "ListingRemoval",
    "PortAssignment",
    "DEFAULT_LEASE_DURATION",
    "LeaseService",
    "DeviceLockRegistry",
    "DeviceService",
    "DependencyError",
    "DeviceError",
    "DeviceNotFoundError",
    "ListingPublisherError",
    "PortAllocatorError",
    "PrivateDataNotFoundError",
]
