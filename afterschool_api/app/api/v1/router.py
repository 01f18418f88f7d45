"""
Top‑level router for version 1 of the API.

This router aggregates the lesson, order and status routers.  When new
endpoints are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import lessons, orders, status

router = APIRouter()

router.include_router(status.router, tags=["status"])
router.include_router(lessons.router, tags=["lessons"])
router.include_router(orders.router, tags=["orders"])
