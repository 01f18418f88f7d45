"""
Order endpoints for API v1.

Any JSON object is accepted as an order and stored as is, with a
server timestamp and ``confirmed`` status added.  Storing an order
does not change the seats of any lesson.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from afterschool_api.app.api.deps import require_store
from afterschool_api.app.schemas.order import OrderConfirmation
from afterschool_api.app.services.booking_service import BookingService

router = APIRouter()


@router.post("/orders", response_model=OrderConfirmation)
async def create_order(
    order: Optional[Dict[str, Any]] = Body(None),
    service: BookingService = Depends(require_store),
) -> OrderConfirmation:
    return await service.place_order(order)
