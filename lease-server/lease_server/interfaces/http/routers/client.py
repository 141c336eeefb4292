"""Endpoints called by client devices to manage their own lease."""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from lease_server.interfaces.http.deps import get_lease_service
from lease_server.modules.devices import DeviceNotFoundError, LeaseService
from lease_server.schemas import (
    CapacityAttributes,
    CheckInResponse,
    DeviceRegistrationResponse,
    DeviceResponse,
    ExpirationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error")


@router.post(
    "/register/{device_id}",
    response_model=DeviceRegistrationResponse,
    summary="Register a client device on the marketplace",
)
async def register(
    device_id: str,
    payload: Optional[CapacityAttributes] = Body(default=None),
    service: LeaseService = Depends(get_lease_service),
):
    capacity = payload.to_update() if payload else None
    try:
        device = await service.register(device_id, capacity)
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Registration of device %s failed", device_id)
        raise _server_error() from exc
    return DeviceRegistrationResponse(device=DeviceResponse.from_domain(device))


@router.get("/checkin/{device_id}", response_model=CheckInResponse, summary="Report that the device is alive")
async def check_in(device_id: str, service: LeaseService = Depends(get_lease_service)):
    try:
        await service.check_in(device_id)
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Check-in of device %s failed", device_id)
        raise _server_error() from exc
    return CheckInResponse(success=True)


@router.get(
    "/expiration/{device_id}",
    response_model=ExpirationResponse,
    summary="Get the lease expiration of the device",
)
async def get_expiration(device_id: str, service: LeaseService = Depends(get_lease_service)):
    try:
        expiration = await service.get_expiration(device_id)
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Expiration lookup for device %s failed", device_id)
        raise _server_error() from exc
    return ExpirationResponse(expiration=expiration)
