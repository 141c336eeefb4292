"""SQLAlchemy ORM models."""
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from lease_server.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Device(Base):
    """Public half of a device: lease window, capacity stats and listing reference."""

    __tablename__ = "devices"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    device_name = Column(String(100))
    expiration = Column(DateTime(timezone=True))
    checkin_timestamp = Column(DateTime(timezone=True))
    memory = Column(String(50))
    disk_space = Column(String(50))
    processor = Column(String(100))
    internet_speed = Column(String(50))
    listing_id = Column(String(100))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    private_data = relationship(
        "DevicePrivateData",
        back_populates="device",
        uselist=False,
        cascade="all, delete-orphan",
    )


class DevicePrivateData(Base):
    """Private half of a device: SSH port assignment and access credentials."""

    __tablename__ = "device_private_data"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    device_id = Column(String(36), ForeignKey("devices.id"), nullable=False, unique=True, index=True)
    assigned_port = Column(Integer)
    access_username = Column(String(100))
    access_password = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    device = relationship("Device", back_populates="private_data")
