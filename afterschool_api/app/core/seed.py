"""
Default lesson catalog.

``seed_if_empty`` runs at startup and fills an empty store;
``reseed`` backs the ``seed_data.py`` script and replaces every lesson
with the catalog.
"""

import logging
from typing import List

from ..schemas.lesson import LessonCreate
from ..services.lesson_store import LessonStore

logger = logging.getLogger(__name__)

SEED_LESSONS: List[LessonCreate] = [
    LessonCreate(subject="Math", location="London", price=100, spaces=5),
    LessonCreate(subject="Math", location="Oxford", price=80, spaces=5),
    LessonCreate(subject="English", location="London", price=90, spaces=5),
    LessonCreate(subject="English", location="York", price=85, spaces=5),
    LessonCreate(subject="Science", location="Bristol", price=95, spaces=5),
    LessonCreate(subject="Science", location="Bath", price=75, spaces=5),
    LessonCreate(subject="Music", location="Liverpool", price=70, spaces=5),
    LessonCreate(subject="Music", location="Manchester", price=65, spaces=5),
    LessonCreate(subject="Art", location="Birmingham", price=60, spaces=5),
    LessonCreate(subject="Art", location="Leeds", price=55, spaces=5),
]


def seed_if_empty(store: LessonStore) -> int:
    """Insert the catalog when no lessons exist; return how many were added."""
    existing = store.count()
    logger.info("Found %s existing lessons", existing)
    if existing:
        return 0
    inserted = store.insert_many(SEED_LESSONS)
    logger.info("Sample data inserted: %s lessons", len(inserted))
    return len(inserted)


def reseed(store: LessonStore) -> int:
    """Delete every lesson and insert the catalog again."""
    removed = store.delete_all()
    inserted = store.insert_many(SEED_LESSONS)
    logger.info("Reseeded lessons: removed %s, inserted %s", removed, len(inserted))
    return len(inserted)
