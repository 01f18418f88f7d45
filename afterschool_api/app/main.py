"""
Main entrypoint for the After School Classes API.

This module assembles the FastAPI application: logging, CORS, request
logging, exception handlers, the database client and the versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.  Run it
with uvicorn or another ASGI server, e.g.::

    uvicorn afterschool_api.app.main:app --reload

The database connection is opened on startup.  When it cannot be
opened the application still starts and answers data requests with
503 until it is restarted with a reachable database.
"""

import logging
import sqlite3
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware
from .core.seed import seed_if_empty
from .services.booking_service import BookingService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment at import time.

    Returns
    -------
    FastAPI
        A configured application.  The database handle and booking
        service are available as ``app.state.database`` and
        ``app.state.booking_service``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    database = Database(settings.database_url)
    app.state.settings = settings
    app.state.database = database
    app.state.booking_service = BookingService.from_database(
        database,
        project_name=settings.project_name,
        strict_lesson_updates=settings.strict_lesson_updates,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Routes are served at the root, and under /api/v1 for clients that
    # expect a versioned prefix.  Only the root copy is documented.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    @app.on_event("startup")
    async def startup_event() -> None:
        connected = await database.connect(
            attempts=settings.db_connect_attempts,
            backoff=settings.db_connect_backoff,
        )
        if not connected or not settings.seed_on_startup:
            return
        try:
            seed_if_empty(app.state.booking_service.lessons)
        except sqlite3.Error:
            logger.exception("Error seeding data")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        database.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
