import pytest

from afterschool_api.app.core.db import Database
from afterschool_api.app.core.errors import InvalidArgument, StoreUnavailable
from afterschool_api.app.core.seed import SEED_LESSONS
from afterschool_api.app.schemas.lesson import LessonCreate
from afterschool_api.app.services.lesson_store import LessonStore
from afterschool_api.app.services.order_store import OrderStore


def test_insert_then_list_round_trip(lesson_store):
    ids = lesson_store.insert_many(SEED_LESSONS)
    listed = lesson_store.list_all()
    assert [l.id for l in listed] == ids
    assert [LessonCreate(**l.model_dump(exclude={"id"})) for l in listed] == SEED_LESSONS


def test_search_requires_term(lesson_store):
    with pytest.raises(InvalidArgument):
        lesson_store.search("")


@pytest.mark.parametrize("spaces", [-1, True, 1.5, "3", None, 2**63])
def test_set_spaces_rejects_invalid_values(lesson_store, spaces):
    [lesson_id] = lesson_store.insert_many([SEED_LESSONS[0]])
    with pytest.raises(InvalidArgument):
        lesson_store.set_spaces(lesson_id, spaces)
    assert lesson_store.list_all()[0].spaces == 5


def test_set_spaces_returns_modified_count(lesson_store):
    [lesson_id] = lesson_store.insert_many([SEED_LESSONS[0]])
    assert lesson_store.set_spaces(lesson_id, 0) == 1
    assert lesson_store.set_spaces("missing", 0) == 0
    assert lesson_store.list_all()[0].spaces == 0


def test_delete_all_and_count(lesson_store):
    lesson_store.insert_many(SEED_LESSONS)
    assert lesson_store.count() == 10
    assert lesson_store.delete_all() == 10
    assert lesson_store.count() == 0


def test_order_insert_returns_unique_ids(order_store):
    assert order_store.insert({}) != order_store.insert({})


def test_stores_without_connection_are_unavailable():
    database = Database("")
    with pytest.raises(StoreUnavailable):
        LessonStore(database).list_all()
    with pytest.raises(StoreUnavailable):
        OrderStore(database).insert({"a": 1})


def test_search_folds_non_ascii_case(lesson_store):
    lesson_store.insert_many([LessonCreate(subject="Straße Art", location="Zürich", price=50, spaces=5)])
    assert [l.location for l in lesson_store.search("ZÜRICH")] == ["Zürich"]
    assert [l.location for l in lesson_store.search("STRASSE")] == ["Zürich"]
