"""Device domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from lease_server.db import models as orm

CAPACITY_FIELDS = ("memory", "disk_space", "processor", "internet_speed")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps read back from the store."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(slots=True)
class Device:
    id: str
    device_name: Optional[str]
    expiration: Optional[datetime]
    checkin_timestamp: Optional[datetime]
    memory: Optional[str]
    disk_space: Optional[str]
    processor: Optional[str]
    internet_speed: Optional[str]
    listing_id: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        return self.expiration is not None and self.expiration < now

    @classmethod
    def from_orm(cls, instance: orm.Device) -> "Device":
        return cls(
            id=str(instance.id),
            device_name=instance.device_name,
            expiration=as_utc(instance.expiration),
            checkin_timestamp=as_utc(instance.checkin_timestamp),
            memory=instance.memory,
            disk_space=instance.disk_space,
            processor=instance.processor,
            internet_speed=instance.internet_speed,
            listing_id=instance.listing_id,
            created_at=as_utc(instance.created_at),
            updated_at=as_utc(instance.updated_at),
        )


@dataclass(slots=True)
class CapacityUpdate:
    """Capacity attributes reported by a device when it registers.

    Every field is optional; ``None`` and empty values leave the stored
    attribute untouched.
    """

    memory: Optional[str] = None
    disk_space: Optional[str] = None
    processor: Optional[str] = None
    internet_speed: Optional[str] = None

    def apply_to(self, instance: orm.Device) -> None:
        for name in CAPACITY_FIELDS:
            value = getattr(self, name)
            if value:
                setattr(instance, name, value)


@dataclass(slots=True, frozen=True)
class PortAssignment:
    port: int
    username: str
    password: str = field(repr=False)


class ListingRemoval(str, Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"
