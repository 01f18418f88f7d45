"""
Persistence for lessons.

``LessonStore`` reads the catalog, searches it and sets the seat count
of a single lesson.  Seat updates are plain writes: there is no version
check, so two concurrent updates of the same lesson are
last‑write‑wins.  Oversell protection is not provided here.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, List

from ..core.db import Database
from ..core.errors import InvalidArgument
from ..schemas.lesson import MAX_INTEGER, LessonCreate, LessonRead

logger = logging.getLogger(__name__)

_LESSON_COLUMNS = "id, subject, location, price, spaces"


def _row_to_lesson(row) -> LessonRead:
    return LessonRead(
        id=row["id"],
        subject=row["subject"],
        location=row["location"],
        price=row["price"],
        spaces=row["spaces"],
    )


class LessonStore:
    """Lesson table access bound to one ``Database``."""

    def __init__(self, database: Database):
        self.database = database

    def list_all(self) -> List[LessonRead]:
        """Return every lesson in insertion order."""
        with self.database.cursor() as cursor:
            rows = cursor.execute(f"SELECT {_LESSON_COLUMNS} FROM lessons ORDER BY rowid").fetchall()
        logger.info("Found %s lessons", len(rows))
        return [_row_to_lesson(row) for row in rows]

    def search(self, term: str) -> List[LessonRead]:
        """Return lessons whose subject or location contains ``term``.

        Matching is a case‑insensitive substring test; the term is taken
        literally, not as a pattern.
        """
        if not term:
            raise InvalidArgument("Query parameter q is required")
        with self.database.cursor() as cursor:
            rows = cursor.execute(
                f"""
                SELECT {_LESSON_COLUMNS} FROM lessons
                WHERE instr(casefold(subject), casefold(?)) > 0
                   OR instr(casefold(location), casefold(?)) > 0
                ORDER BY rowid
                """,
                (term, term),
            ).fetchall()
        return [_row_to_lesson(row) for row in rows]

    def set_spaces(self, lesson_id: str, spaces: int) -> int:
        """Set the seat count of one lesson and stamp ``last_updated``.

        Returns the number of modified lessons: ``0`` when ``lesson_id``
        does not exist.
        """
        if isinstance(spaces, bool) or not isinstance(spaces, int) or not 0 <= spaces <= MAX_INTEGER:
            raise InvalidArgument("Valid spaces value required")
        with self.database.cursor() as cursor:
            cursor.execute(
                "UPDATE lessons SET spaces = ?, last_updated = ? WHERE id = ?",
                (spaces, datetime.now(timezone.utc).isoformat(), lesson_id),
            )
            modified = cursor.rowcount
        logger.info("Updated lesson %s, spaces: %s (modified %s)", lesson_id, spaces, modified)
        return modified

    def insert_many(self, lessons: Iterable[LessonCreate]) -> List[str]:
        """Insert lessons in the given order and return their new ids."""
        records = [(uuid.uuid4().hex, lesson) for lesson in lessons]
        with self.database.cursor() as cursor:
            cursor.executemany(
                "INSERT INTO lessons (id, subject, location, price, spaces) VALUES (?, ?, ?, ?, ?)",
                [
                    (lesson_id, lesson.subject, lesson.location, lesson.price, lesson.spaces)
                    for lesson_id, lesson in records
                ],
            )
        return [lesson_id for lesson_id, _ in records]

    def delete_all(self) -> int:
        with self.database.cursor() as cursor:
            cursor.execute("DELETE FROM lessons")
            return cursor.rowcount

    def count(self) -> int:
        with self.database.cursor() as cursor:
            row = cursor.execute("SELECT COUNT(*) AS total FROM lessons").fetchone()
        return row["total"]
