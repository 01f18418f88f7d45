"""
Status endpoints for API v1.

``GET /`` is a banner that reports whether the database is connected;
``GET /health`` pings the database and answers 503 when it is not
reachable.  Neither endpoint requires a live store.
"""

from fastapi import APIRouter, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from afterschool_api.app.api.deps import get_booking_service
from afterschool_api.app.schemas.status import HealthStatus, StatusBanner
from afterschool_api.app.services.booking_service import BookingService

router = APIRouter()


@router.get("/", response_model=StatusBanner)
async def banner(service: BookingService = Depends(get_booking_service)) -> StatusBanner:
    return service.banner()


@router.get("/health", response_model=HealthStatus)
async def health(service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    """Report database connectivity.  Unhealthy results use status 503."""
    result = await service.health()
    code = status.HTTP_200_OK if result.healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content=jsonable_encoder(result, exclude_none=True))
