"""
FastAPI dependencies shared by the endpoint modules.

The booking service is created by ``create_app`` and stored on
``app.state``; handlers receive it through these functions.  Data
endpoints depend on ``require_store`` so an unavailable store answers
503 before the request body or query is validated.
"""

from fastapi import Request

from ..core.errors import StoreUnavailable
from ..services.booking_service import BookingService


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def require_store(request: Request) -> BookingService:
    service = get_booking_service(request)
    if not service.is_available:
        raise StoreUnavailable()
    return service
