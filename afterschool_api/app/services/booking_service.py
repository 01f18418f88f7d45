"""
Business logic for lessons and orders.

The ``BookingService`` is the boundary between HTTP handlers and the
stores.  It validates input before any store call and translates
driver errors into the error types from ``core.errors`` so handlers
never see a raw ``sqlite3`` exception.

Placing an order and adjusting seats are separate operations: an order
is stored without touching any lesson, and clients decrement seats with
their own follow‑up call.  Nothing ties the two together, so one may
succeed while the other fails.
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, List, Mapping, Optional

from ..core.db import Database
from ..core.errors import BookingError, InternalError, InvalidArgument, NotFound, StoreUnavailable
from ..schemas.lesson import MAX_INTEGER, LessonRead, SeatUpdateResult
from ..schemas.order import OrderConfirmation
from ..schemas.status import HealthStatus, StatusBanner
from .lesson_store import LessonStore
from .order_store import OrderStore

logger = logging.getLogger(__name__)


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Map driver exceptions raised inside the block onto ``BookingError``."""
    try:
        yield
    except BookingError:
        raise
    except sqlite3.ProgrammingError as exc:
        # Raised when the shared connection has been closed underneath us.
        logger.error("Store unavailable during %s: %s", operation, exc)
        raise StoreUnavailable() from exc
    except (sqlite3.Error, OverflowError) as exc:
        # OverflowError: a Python int the driver cannot bind as INTEGER.
        logger.exception("Error %s", operation)
        raise InternalError(str(exc)) from exc


class BookingService:
    """Orchestrates the lesson and order stores for the API."""

    def __init__(
        self,
        database: Database,
        lessons: LessonStore,
        orders: OrderStore,
        project_name: str = "After School Classes API",
        strict_lesson_updates: bool = False,
    ):
        self.database = database
        self.lessons = lessons
        self.orders = orders
        self.project_name = project_name
        self.strict_lesson_updates = strict_lesson_updates

    @classmethod
    def from_database(cls, database: Database, **options) -> "BookingService":
        return cls(database, LessonStore(database), OrderStore(database), **options)

    @property
    def is_available(self) -> bool:
        return self.database.is_connected

    async def list_lessons(self) -> List[LessonRead]:
        with translate_store_errors("fetching lessons"):
            return self.lessons.list_all()

    async def search_lessons(self, term: Optional[str]) -> List[LessonRead]:
        if not term:
            raise InvalidArgument("Query parameter q is required")
        with translate_store_errors("searching lessons"):
            return self.lessons.search(term)

    async def place_order(self, payload: Optional[Mapping[str, Any]]) -> OrderConfirmation:
        """Store an order.  Seat counts are left untouched."""
        with translate_store_errors("saving order"):
            order_id = self.orders.insert(payload or {})
        return OrderConfirmation(order_id=order_id)

    async def adjust_seats(self, lesson_id: str, spaces: Optional[int]) -> SeatUpdateResult:
        """Set the seat count of a lesson.

        An unknown ``lesson_id`` is reported as ``modifiedCount: 0`` unless
        ``strict_lesson_updates`` is enabled, in which case ``NotFound`` is
        raised.
        """
        if isinstance(spaces, bool) or not isinstance(spaces, int) or not 0 <= spaces <= MAX_INTEGER:
            raise InvalidArgument("Valid spaces value required")
        with translate_store_errors("updating lesson"):
            modified = self.lessons.set_spaces(lesson_id, spaces)
        if modified == 0 and self.strict_lesson_updates:
            raise NotFound(f"Lesson {lesson_id} not found")
        return SeatUpdateResult(modified_count=modified, lesson_id=lesson_id, new_spaces=spaces)

    def banner(self) -> StatusBanner:
        return StatusBanner(
            message=self.project_name,
            timestamp=datetime.now(timezone.utc),
            database="connected" if self.is_available else "disconnected",
        )

    async def health(self) -> HealthStatus:
        """Probe the store.  Failures are reported, never raised."""
        now = datetime.now(timezone.utc)
        if not self.is_available:
            return HealthStatus(status="unhealthy", database="disconnected", timestamp=now)
        try:
            self.database.ping()
        except (sqlite3.Error, StoreUnavailable) as exc:
            logger.warning("Health check ping failed: %s", exc)
            return HealthStatus(status="unhealthy", database="disconnected", timestamp=now, error=str(exc))
        return HealthStatus(status="healthy", database="connected", timestamp=now)
