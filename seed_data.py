#!/usr/bin/env python3
"""
Reset the lesson catalog of the After School Classes database.

Every existing lesson is deleted and the ten default lessons are
inserted again with five spaces each.  Orders are left untouched.

Usage:
    python seed_data.py --db ./afterschool.db

If --db is omitted, DATABASE_URL from the environment (or `.env`) is used.
"""

import argparse
import asyncio
import sys

from afterschool_api.app.core.config import settings
from afterschool_api.app.core.db import Database
from afterschool_api.app.core.logging_config import setup_logging
from afterschool_api.app.core.seed import reseed
from afterschool_api.app.services.lesson_store import LessonStore


async def seed_database(database_url: str) -> int:
    database = Database(database_url)
    if not await database.connect(attempts=settings.db_connect_attempts, backoff=settings.db_connect_backoff):
        print(f"[!] Could not connect to database: {database_url or '<unset>'}", file=sys.stderr)
        return 1
    try:
        inserted = reseed(LessonStore(database))
        print(f"[+] {inserted} lessons inserted successfully!")
        return 0
    finally:
        database.close()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Reseed the lesson catalog (SQLite).")
    ap.add_argument("--db", default=settings.database_url, help="Database path or sqlite:/// URL (defaults to DATABASE_URL)")
    args = ap.parse_args(argv)
    setup_logging(settings.log_level)
    return asyncio.run(seed_database(args.db))


if __name__ == "__main__":
    sys.exit(main())
