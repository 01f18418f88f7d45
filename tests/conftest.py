"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path`` and a fresh
application built by ``create_app``.  The ``client`` fixture enters the
``TestClient`` context so startup (connect, migrate, seed) runs.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from afterschool_api.app.core.config import Settings
from afterschool_api.app.core.db import Database
from afterschool_api.app.main import create_app
from afterschool_api.app.services.lesson_store import LessonStore
from afterschool_api.app.services.order_store import OrderStore


def make_settings(**overrides) -> Settings:
    values = dict(
        database_url="",
        cors_origins="http://localhost:8080",
        db_connect_attempts=1,
        db_connect_backoff=0,
        seed_on_startup=True,
        strict_lesson_updates=False,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "afterschool.db")


@pytest.fixture
def settings(db_path):
    return make_settings(database_url=db_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def offline_client():
    """Client for an app started without DATABASE_URL."""
    with TestClient(create_app(make_settings(database_url=""))) as test_client:
        yield test_client


@pytest.fixture
def database(db_path):
    db = Database(db_path)
    assert asyncio.run(db.connect())
    yield db
    db.close()


@pytest.fixture
def lesson_store(database):
    return LessonStore(database)


@pytest.fixture
def order_store(database):
    return OrderStore(database)


@pytest.fixture
def lessons(client):
    return client.get("/lessons").json()
