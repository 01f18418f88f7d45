"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so local development does not need exported variables.
Defaults are provided for every field except the database location:
without ``DATABASE_URL`` the service starts in unavailable mode and
answers data requests with 503.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()

# Local dev server and the published GitHub Pages frontend.
DEFAULT_CORS_ORIGINS = "http://localhost:8080,https://shiivampatell12.github.io"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "After School Classes API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or connection string for the SQLite database.  Accepts a plain
    # path, ``sqlite:///<path>`` or ``:memory:``.  Relative paths are
    # resolved against the ``afterschool_api`` package directory by the
    # ``db`` module, not against the working directory.
    database_url: str = os.getenv("DATABASE_URL", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    # Startup connection policy: number of attempts, and the delay before
    # the second attempt in seconds.  The delay doubles after each failure.
    db_connect_attempts: int = int(os.getenv("DB_CONNECT_ATTEMPTS", "3"))
    db_connect_backoff: float = float(os.getenv("DB_CONNECT_BACKOFF", "0.5"))

    # Insert the default lesson catalog when the lessons table is empty.
    seed_on_startup: bool = _env_flag("SEED_ON_STARTUP", "true")

    # When enabled, updating the seats of an unknown lesson answers 404
    # instead of reporting ``modifiedCount: 0``.
    strict_lesson_updates: bool = _env_flag("STRICT_LESSON_UPDATES", "false")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at import time, environment variables should be set
# before importing this module.
settings = Settings()
