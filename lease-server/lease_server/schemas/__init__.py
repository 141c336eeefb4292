"""Pydantic schemas used across the project.

Field names are snake_case in Python; the wire format keeps the camelCase
names the device client sends and expects.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from lease_server.modules.devices import CapacityUpdate, Device


class CapacityAttributes(BaseModel):
    """Optional capacity stats a device reports when it registers."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    memory: Optional[str] = None
    disk_space: Optional[str] = Field(default=None, alias="diskSpace")
    processor: Optional[str] = None
    internet_speed: Optional[str] = Field(default=None, alias="internetSpeed")

    def to_update(self) -> CapacityUpdate:
        return CapacityUpdate(
            memory=self.memory,
            disk_space=self.disk_space,
            processor=self.processor,
            internet_speed=self.internet_speed,
        )


class DeviceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    device_name: Optional[str] = Field(default=None, alias="deviceName")
    expiration: Optional[datetime] = None
    checkin_timestamp: Optional[datetime] = Field(default=None, alias="checkinTimeStamp")
    memory: Optional[str] = None
    disk_space: Optional[str] = Field(default=None, alias="diskSpace")
    processor: Optional[str] = None
    internet_speed: Optional[str] = Field(default=None, alias="internetSpeed")
    listing_id: Optional[str] = Field(default=None, alias="listingId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=device.id,
            device_name=device.device_name,
            expiration=device.expiration,
            checkin_timestamp=device.checkin_timestamp,
            memory=device.memory,
            disk_space=device.disk_space,
            processor=device.processor,
            internet_speed=device.internet_speed,
            listing_id=device.listing_id,
            created_at=device.created_at,
            updated_at=device.updated_at,
        )


class DeviceRegistrationResponse(BaseModel):
    device: DeviceResponse


class CheckInResponse(BaseModel):
    success: bool = True


class ExpirationResponse(BaseModel):
    expiration: Optional[datetime] = None


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str
    service: str
    version: str
    lease_duration_seconds: int = Field(alias="leaseDurationSeconds")
    checkin_interval_seconds: int = Field(alias="checkinIntervalSeconds")
