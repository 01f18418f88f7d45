"""Entry point for the After School Classes API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker or a PaaS, where you only specify a single Python file to run.

Configuration such as DATABASE_URL, PORT and CORS_ORIGINS may be
placed in a `.env` file in the same directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from afterschool_api.app.core.config import settings
from afterschool_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from the `HOST` and `PORT` environment
    variables.  Defaults are `0.0.0.0` and `3000`.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info", access_log=False)
    server = Server(config)
    logging.getLogger(__name__).info(
        "Server running on port %s; health check at http://localhost:%s/health",
        settings.port,
        settings.port,
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
