"""
SQLite database client and simple migration system.

The ``Database`` class owns the single connection shared by every
request.  It is created once by the application factory, connected on
startup with a bounded retry policy and closed on shutdown.  Stores
receive the instance explicitly instead of reaching for a module level
handle.

Lessons are plain rows; orders are free‑form documents, so their
client supplied fields are stored as JSON text.  The migration
mechanism stores applied migration versions in the ``migrations``
table and executes new migrations in order.
"""

import asyncio
import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .errors import StoreUnavailable

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS lessons (
            id TEXT PRIMARY KEY,
            subject TEXT NOT NULL,
            location TEXT NOT NULL,
            price INTEGER NOT NULL CHECK (price >= 0),
            spaces INTEGER NOT NULL CHECK (spaces >= 0),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            last_updated TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS orders (
            id TEXT PRIMARY KEY,
            payload TEXT NOT NULL,
            status TEXT NOT NULL,
            created_at TIMESTAMP NOT NULL
        );
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the SQLite database location from a connection string.

    A ``sqlite:///`` prefix is stripped.  ``:memory:`` and absolute
    paths are returned as is; relative paths are resolved against the
    ``afterschool_api`` package directory, not the working directory.
    """
    path = database_url
    if path.startswith("sqlite:///"):
        path = path[len("sqlite:///"):]
    if path == ":memory:" or os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent  # afterschool_api/
    return str((base_dir / path).resolve())


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def apply_migrations(conn: sqlite3.Connection) -> int:
    """Apply pending migrations and return the resulting schema version."""
    cursor = conn.cursor()
    cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    current_version = row["version"] if row and row["version"] is not None else 0

    for version, sql in MIGRATIONS:
        if version > current_version:
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            current_version = version
            logger.info("Applied database migration %s", version)
    conn.commit()
    return current_version


class Database:
    """The application's single store connection."""

    def __init__(self, url: str):
        self.url = url
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _open(self) -> sqlite3.Connection:
        # Requests are served from the event loop thread while startup and
        # test code may run elsewhere, so thread affinity checks are off.
        conn = sqlite3.connect(resolve_database_path(self.url), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        # SQLite's lower() only folds ASCII; search uses this instead.
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        try:
            conn.execute("SELECT 1")
            apply_migrations(conn)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    async def connect(self, attempts: int = 1, backoff: float = 0.5) -> bool:
        """Open the connection, retrying up to ``attempts`` times.

        Returns ``True`` once connected.  A missing connection string or
        repeated failures are logged and reported as ``False`` so the
        application can keep serving 503 responses instead of exiting.
        """
        if self._conn is not None:
            return True
        if not self.url:
            logger.error("DATABASE_URL is missing; API will return 503 errors")
            return False

        attempts = max(1, attempts)
        delay = backoff
        for attempt in range(1, attempts + 1):
            logger.info("Connecting to database (attempt %s/%s)", attempt, attempts)
            try:
                self._conn = self._open()
            except sqlite3.Error as exc:
                logger.warning("Database connection attempt %s/%s failed: %s", attempt, attempts, exc)
                if attempt < attempts:
                    await asyncio.sleep(delay)
                    delay *= 2
                continue
            logger.info("Connected to database %s", resolve_database_path(self.url))
            return True

        logger.error("Could not connect to database after %s attempts; API will return 503 errors", attempts)
        return False

    def ping(self) -> None:
        """Run a trivial query against the store.

        Raises ``StoreUnavailable`` when no connection is held; driver
        errors propagate to the caller.
        """
        if self._conn is None:
            raise StoreUnavailable()
        self._conn.execute("SELECT 1").fetchone()

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, committing on success and rolling back on error."""
        if self._conn is None:
            raise StoreUnavailable()
        conn = self._conn
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.info("Database connection closed")
