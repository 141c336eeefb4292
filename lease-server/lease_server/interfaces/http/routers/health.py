"""Service health endpoint."""

from fastapi import APIRouter

from lease_server import __version__
from lease_server.core.config import get_settings
from lease_server.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        service=settings.project_name,
        version=__version__,
        lease_duration_seconds=settings.lease.duration_seconds,
        checkin_interval_seconds=settings.lease.checkin_interval_seconds,
    )
