"""Device domain specific exceptions."""


class DeviceError(Exception):
    """Base class for device related domain errors."""


class DeviceNotFoundError(DeviceError):
    """Raised when the requested device could not be found."""


class PrivateDataNotFoundError(DeviceNotFoundError):
    """Raised when a device exists without its private data record."""


class DependencyError(DeviceError):
    """Raised when an external collaborator call fails."""


class PortAllocatorError(DependencyError):
    """Raised when the SSH port allocator cannot be reached or misbehaves."""


class ListingPublisherError(DependencyError):
    """Raised when the marketplace rejects or fails a listing call."""
