import pytest

from afterschool_api.app.schemas.lesson import LessonCreate
from afterschool_api.app.services.lesson_store import LessonStore

CATALOG = [
    ("Math", "London", 100, 5),
    ("Math", "Oxford", 80, 5),
    ("English", "London", 90, 5),
    ("English", "York", 85, 5),
    ("Science", "Bristol", 95, 5),
    ("Science", "Bath", 75, 5),
    ("Music", "Liverpool", 70, 5),
    ("Music", "Manchester", 65, 5),
    ("Art", "Birmingham", 60, 5),
    ("Art", "Leeds", 55, 5),
]


def test_list_lessons_returns_seeded_catalog(client):
    resp = client.get("/lessons")
    assert resp.status_code == 200
    body = resp.json()
    assert [(l["subject"], l["location"], l["price"], l["spaces"]) for l in body] == CATALOG
    assert set(body[0]) == {"id", "subject", "location", "price", "spaces"}
    assert len({l["id"] for l in body}) == 10


def test_listed_lessons_never_have_negative_spaces(client, lessons):
    client.put(f"/lessons/{lessons[0]['id']}", json={"spaces": 0})
    client.put(f"/lessons/{lessons[1]['id']}", json={"spaces": -4})
    assert all(l["spaces"] >= 0 for l in client.get("/lessons").json())


@pytest.mark.parametrize("term", ["math", "MATH", "Math", "mAtH"])
def test_search_is_case_insensitive(client, term):
    resp = client.get("/search", params={"q": term})
    assert resp.status_code == 200
    assert [(l["subject"], l["location"]) for l in resp.json()] == [("Math", "London"), ("Math", "Oxford")]


def test_search_matches_location(client):
    body = client.get("/search", params={"q": "london"}).json()
    assert [(l["subject"], l["location"]) for l in body] == [("Math", "London"), ("English", "London")]


def test_search_matches_substrings(client):
    body = client.get("/search", params={"q": "ist"}).json()
    assert [l["location"] for l in body] == ["Bristol"]


def test_search_treats_term_literally(client):
    assert client.get("/search", params={"q": ".*"}).json() == []
    assert client.get("/search", params={"q": "%"}).json() == []


def test_search_without_matches_returns_empty_list(client):
    resp = client.get("/search", params={"q": "chemistry"})
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.parametrize("params", [{}, {"q": ""}])
def test_search_requires_query_without_touching_store(client, monkeypatch, params):
    def fail(self, term):
        raise AssertionError("store should not be queried")

    monkeypatch.setattr(LessonStore, "search", fail)
    resp = client.get("/search", params=params)
    assert resp.status_code == 400
    assert resp.json()["error"] == "Query parameter q is required"


def test_routes_are_also_served_under_api_v1(client):
    resp = client.get("/api/v1/lessons")
    assert resp.status_code == 200
    assert len(resp.json()) == 10


def test_search_is_case_insensitive_beyond_ascii(client, app):
    app.state.booking_service.lessons.insert_many(
        [LessonCreate(subject="Drama", location="Zürich", price=50, spaces=5)]
    )
    body = client.get("/search", params={"q": "ZÜRICH"}).json()
    assert [(l["subject"], l["location"]) for l in body] == [("Drama", "Zürich")]
