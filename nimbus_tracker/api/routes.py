"""
FastAPI routes for the tracking proxy.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from nimbus_tracker.dependencies import get_tracking_service
from nimbus_tracker.schemas import HealthResponse, TrackingResponse
from nimbus_tracker.services import TrackingService

router = APIRouter()


@router.get("/track/{awb}", status_code=HTTPStatus.OK, response_model=TrackingResponse)
async def track_shipment(
    awb: str,
    tracking_service: Annotated[TrackingService, Depends(get_tracking_service)],
) -> TrackingResponse:
    """Return tracking details for an AWB, enriched with order information."""
    data = await tracking_service.track(awb)
    return TrackingResponse(data=data)


@router.get("/health", status_code=HTTPStatus.OK, response_model=HealthResponse)
async def healthcheck() -> HealthResponse:
    """Simple health endpoint for monitoring."""
    return HealthResponse()


__all__ = ["router"]
