import pytest
from fastapi.testclient import TestClient

from afterschool_api.app.main import create_app
from afterschool_api.app.services.lesson_store import LessonStore

from conftest import make_settings


def _spaces_by_id(client):
    return {l["id"]: l["spaces"] for l in client.get("/lessons").json()}


def test_update_changes_only_the_target_lesson(client, lessons):
    target = lessons[2]["id"]
    before = _spaces_by_id(client)

    resp = client.put(f"/lessons/{target}", json={"spaces": 3})

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "modifiedCount": 1, "lessonId": target, "newSpaces": 3}
    after = _spaces_by_id(client)
    assert after[target] == 3
    assert {k: v for k, v in after.items() if k != target} == {k: v for k, v in before.items() if k != target}


def test_repeating_update_yields_same_state(client, lessons):
    target = lessons[0]["id"]
    client.put(f"/lessons/{target}", json={"spaces": 3})
    first = client.get("/lessons").json()
    client.put(f"/lessons/{target}", json={"spaces": 3})
    assert client.get("/lessons").json() == first


def test_update_stamps_last_updated(client, app, lessons):
    target = lessons[0]["id"]
    client.put(f"/lessons/{target}", json={"spaces": 4})
    with app.state.database.cursor() as cursor:
        row = cursor.execute("SELECT spaces, last_updated FROM lessons WHERE id = ?", (target,)).fetchone()
    assert row["spaces"] == 4
    assert row["last_updated"] is not None


@pytest.mark.parametrize(
    "body", [{"spaces": -1}, {}, {"spaces": "many"}, {"spaces": 2.5}, {"spaces": 10**20}]
)
def test_invalid_spaces_rejected_before_store(client, lessons, monkeypatch, body):
    def fail(self, lesson_id, spaces):
        raise AssertionError("store should not be written")

    monkeypatch.setattr(LessonStore, "set_spaces", fail)
    resp = client.put(f"/lessons/{lessons[0]['id']}", json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_unknown_lesson_reports_zero_modified(client):
    resp = client.put("/lessons/does-not-exist", json={"spaces": 2})
    assert resp.status_code == 200
    assert resp.json()["modifiedCount"] == 0
    assert resp.json()["success"] is True


def test_unknown_lesson_is_not_found_in_strict_mode(db_path):
    app = create_app(make_settings(database_url=db_path, strict_lesson_updates=True))
    with TestClient(app) as client:
        resp = client.put("/lessons/does-not-exist", json={"spaces": 2})
        assert resp.status_code == 404
        assert resp.json()["error"] == "Lesson does-not-exist not found"

        lesson_id = client.get("/lessons").json()[0]["id"]
        assert client.put(f"/lessons/{lesson_id}", json={"spaces": 2}).json()["modifiedCount"] == 1


def test_repeating_identical_update_still_counts_the_lesson(client, lessons):
    target = lessons[0]["id"]
    assert client.put(f"/lessons/{target}", json={"spaces": 5}).json()["modifiedCount"] == 1
    assert client.put(f"/lessons/{target}", json={"spaces": 5}).json()["modifiedCount"] == 1
