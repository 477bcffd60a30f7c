"""Tests for the HTTP API."""

from datetime import datetime, timedelta

import pytest
import pytz

from classroom_registry.app import app
from classroom_registry.core.dependencies import get_relationship_store


def _register(client, teacher, students):
    response = client.post("/api/register", json={"teacher": teacher, "students": students})
    assert response.status_code == 204
    return response


class TestInfo:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_root(self, client):
        assert client.get("/").json()["health"] == "/api/health"


class TestRegister:
    def test_register(self, client):
        response = _register(client, "teacher@example.com", ["s1@example.com", "s2@example.com"])
        assert response.content == b""

    def test_register_on_local_hosts(self, client):
        _register(client, "teacher@localhost", ["student@localhost"])
        _register(client, "teacher@school.test", ["s@school.test"])

        response = client.get("/api/commonstudents", params={"teacher": "teacher@localhost"})
        assert response.json() == {"students": ["student@localhost"]}

    def test_register_twice(self, client):
        _register(client, "teacher@example.com", ["s1@example.com"])
        _register(client, "teacher@example.com", ["s1@example.com"])

    def test_no_students(self, client):
        response = client.post("/api/register", json={"teacher": "teacher@example.com"})
        assert response.status_code == 400

    def test_invalid_teacher(self, client):
        response = client.post(
            "/api/register", json={"teacher": "teacher", "students": ["s1@example.com"]}
        )
        assert response.status_code == 400
        assert "Teacher's email (teacher) is invalid" in response.json()["detail"]

    def test_invalid_student(self, client):
        response = client.post(
            "/api/register",
            json={"teacher": "teacher@example.com", "students": ["s1@example.com", "oops"]},
        )
        assert response.status_code == 400
        assert "Student's email (oops) is invalid" in response.json()["detail"]

    def test_missing_teacher(self, client):
        response = client.post("/api/register", json={"students": ["s1@example.com"]})
        assert response.status_code == 422


class TestCommonStudents:
    @pytest.fixture(autouse=True)
    def registrations(self, client):
        _register(client, "teacher1@example.com", ["student2@example.com", "student1@example.com"])
        _register(client, "teacher2@example.com", ["student1@example.com"])

    def test_common_students(self, client):
        response = client.get(
            "/api/commonstudents",
            params=[("teacher", "teacher1@example.com"), ("teacher", "teacher2@example.com")],
        )
        assert response.status_code == 200
        assert response.json() == {"students": ["student1@example.com"]}

    def test_single_teacher_is_sorted(self, client):
        response = client.get("/api/commonstudents", params={"teacher": "teacher1@example.com"})
        assert response.json() == {
            "students": ["student1@example.com", "student2@example.com"]
        }

    def test_no_teacher(self, client):
        response = client.get("/api/commonstudents")
        assert response.status_code == 400
        assert response.json()["detail"] == "No teachers given in request."

    def test_invalid_teacher(self, client):
        response = client.get("/api/commonstudents", params={"teacher": "teacher1"})
        assert response.status_code == 400


class TestSuspend:
    @pytest.fixture(autouse=True)
    def registrations(self, client):
        _register(client, "teacher1@example.com", ["student1@example.com", "student2@example.com"])

    def _recipients(self, client):
        response = client.post(
            "/api/retrievefornotifications",
            json={"teacher": "teacher1@example.com", "notification": "Hey everybody"},
        )
        assert response.status_code == 200
        return response.json()["recipients"]

    def test_suspend_until_further_notice(self, client):
        response = client.post("/api/suspend", json={"student": "student2@example.com"})
        assert response.status_code == 204
        assert self._recipients(client) == ["student1@example.com"]

    def test_suspend_until(self, client):
        until = (datetime.now(pytz.utc) + timedelta(days=1)).isoformat()
        response = client.post(
            "/api/suspend", json={"student": "student2@example.com", "suspended_until": until}
        )
        assert response.status_code == 204
        assert self._recipients(client) == ["student1@example.com"]

    def test_until_in_the_past(self, client):
        response = client.post(
            "/api/suspend",
            json={"student": "student2@example.com", "suspended_until": "2000-01-01T00:00:00Z"},
        )
        assert response.status_code == 400
        assert self._recipients(client) == ["student1@example.com", "student2@example.com"]

    def test_unknown_student(self, client):
        response = client.post("/api/suspend", json={"student": "ghost@example.com"})
        assert response.status_code == 404

    def test_teacher_cannot_be_suspended(self, client):
        response = client.post("/api/suspend", json={"student": "teacher1@example.com"})
        assert response.status_code == 404

    def test_invalid_student(self, client):
        response = client.post("/api/suspend", json={"student": "student2"})
        assert response.status_code == 400


class TestRetrieveForNotifications:
    @pytest.fixture(autouse=True)
    def registrations(self, client):
        _register(client, "teacher1@example.com", ["student1@example.com", "student2@example.com"])
        _register(client, "teacher2@example.com", ["student3@example.com"])

    def _retrieve(self, client, teacher, notification):
        return client.post(
            "/api/retrievefornotifications",
            json={"teacher": teacher, "notification": notification},
        )

    def test_mentions_and_roster(self, client):
        response = self._retrieve(
            client,
            "teacher1@example.com",
            "Hello, @student2@example.com and @student3@example.com",
        )
        assert response.status_code == 200
        assert response.json() == {
            "recipients": [
                "student1@example.com",
                "student2@example.com",
                "student3@example.com",
            ]
        }

    def test_suspended_students_are_excluded(self, client):
        client.post("/api/suspend", json={"student": "student2@example.com"})
        client.post("/api/suspend", json={"student": "student3@example.com"})

        response = self._retrieve(
            client,
            "teacher1@example.com",
            "Hello, @student2@example.com and @student3@example.com",
        )
        assert response.json() == {"recipients": ["student1@example.com"]}

    def test_unknown_teacher(self, client):
        response = self._retrieve(client, "ghost@example.com", "Hello")
        assert response.status_code == 404

    def test_mentioned_teacher(self, client):
        response = self._retrieve(client, "teacher1@example.com", "Hi @teacher2@example.com")
        assert response.status_code == 404
        assert "teacher2@example.com" in response.json()["detail"]

    def test_invalid_teacher(self, client):
        response = self._retrieve(client, "teacher1", "Hello")
        assert response.status_code == 400

    def test_missing_notification(self, client):
        response = client.post(
            "/api/retrievefornotifications", json={"teacher": "teacher1@example.com"}
        )
        assert response.status_code == 422


class TestStoreUnavailable:
    @pytest.fixture(autouse=True)
    def use_broken_store(self, client, broken_store):
        app.dependency_overrides[get_relationship_store] = lambda: broken_store
        yield
        app.dependency_overrides.pop(get_relationship_store, None)

    def test_common_students(self, client):
        response = client.get("/api/commonstudents", params={"teacher": "teacher1@example.com"})
        assert response.status_code == 503

    def test_retrieve_for_notifications(self, client):
        response = client.post(
            "/api/retrievefornotifications",
            json={"teacher": "teacher1@example.com", "notification": "Hello"},
        )
        assert response.status_code == 503

    def test_register(self, client):
        response = client.post(
            "/api/register",
            json={"teacher": "teacher1@example.com", "students": ["s1@example.com"]},
        )
        assert response.status_code == 503
