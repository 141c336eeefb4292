"""Read-only device endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from lease_server.interfaces.http.deps import get_device_service
from lease_server.modules.devices import DeviceNotFoundError, DeviceService
from lease_server.schemas import DeviceResponse

router = APIRouter()


@router.get("/{device_id}", response_model=DeviceResponse, summary="Get a device's public record")
async def get_device(device_id: str, service: DeviceService = Depends(get_device_service)):
    try:
        device = await service.require_device(device_id)
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return DeviceResponse.from_domain(device)
