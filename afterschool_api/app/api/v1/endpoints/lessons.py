"""
Lesson endpoints for API v1.

These routes list the lesson catalog, search it by subject or location
and set the number of available seats on one lesson.  Seat updates
overwrite the stored value; clients compute the new count themselves
after placing an order.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from afterschool_api.app.api.deps import require_store
from afterschool_api.app.schemas.lesson import LessonRead, SeatUpdate, SeatUpdateResult
from afterschool_api.app.services.booking_service import BookingService

router = APIRouter()


@router.get("/lessons", response_model=List[LessonRead])
async def list_lessons(service: BookingService = Depends(require_store)) -> List[LessonRead]:
    """Return every lesson in insertion order."""
    return await service.list_lessons()


@router.get("/search", response_model=List[LessonRead])
async def search_lessons(
    q: Optional[str] = Query(None, description="Text to look for in subject or location"),
    service: BookingService = Depends(require_store),
) -> List[LessonRead]:
    """Search lessons by subject or location.

    Matching is a case‑insensitive substring test, so ``math``, ``MATH``
    and ``Math`` return the same lessons.  A missing ``q`` is answered
    with 400.
    """
    return await service.search_lessons(q)


@router.put("/lessons/{lesson_id}", response_model=SeatUpdateResult)
async def update_lesson_spaces(
    update: SeatUpdate,
    lesson_id: str = Path(..., description="ID of the lesson"),
    service: BookingService = Depends(require_store),
) -> SeatUpdateResult:
    """Set the available seats of a lesson.

    ``spaces`` must be a non‑negative integer.  An unknown lesson id is
    reported with ``modifiedCount`` of 0, or 404 when strict lesson
    updates are enabled.
    """
    return await service.adjust_seats(lesson_id, update.spaces)
