"""HTTP adapters for the port allocator and the marketplace."""

from .marketplace import HttpListingPublisher
from .port_allocator import HttpPortAllocator

__all__ = ["HttpListingPublisher", "HttpPortAllocator"]
