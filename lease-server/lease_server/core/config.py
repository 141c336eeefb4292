"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./lease_server.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class LeaseSettings(BaseModel):
    duration_seconds: int = Field(default=60 * 60 * 24, ge=0)
    # Devices are expected to check in at this cadence.
    checkin_interval_seconds: int = Field(default=60 * 2, gt=0)


class PortAllocatorSettings(BaseModel):
    base_url: str = "http://127.0.0.1:3000/api/sshport"
    timeout: float = Field(default=10.0, gt=0)


class MarketplaceSettings(BaseModel):
    base_url: str = "http://127.0.0.1:4002/ob"
    timeout: float = Field(default=15.0, gt=0)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "P2P VPS Lease Server"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    lease: LeaseSettings = LeaseSettings()
    port_allocator: PortAllocatorSettings = PortAllocatorSettings()
    marketplace: MarketplaceSettings = MarketplaceSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def lease_duration_seconds(self) -> int:
        return self.lease.duration_seconds

    @property
    def log_level(self) -> str:
        return self.logging.level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
