"""API tests for the /tasks endpoints."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


def _create(client, headers, **payload):
    response = client.post("/tasks", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestTaskRoutes:
    """Test CRUD through the HTTP surface."""

    def test_create_task(self, test_client, auth_headers):
        response = test_client.post("/tasks", json={"title": "buy milk"}, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Task created successfully"
        assert body["data"]["title"] == "buy milk"
        assert body["data"]["status"] == "pending"

    def test_create_task_validation_error(self, test_client, auth_headers):
        response = test_client.post(
            "/tasks",
            json={"title": "", "status": "archived", "dueDate": "soon"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation error"
        assert {e["field"] for e in body["errors"]} == {"title", "status", "dueDate"}

    def test_list_tasks(self, test_client, auth_headers):
        _create(test_client, auth_headers, title="one")
        _create(test_client, auth_headers, title="two", status="completed")

        response = test_client.get("/tasks", params={"status": "completed"}, headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert [t["title"] for t in data["tasks"]] == ["two"]
        assert data["pagination"]["total"] == 1

    def test_list_tasks_bad_query(self, test_client, auth_headers):
        response = test_client.get("/tasks", params={"limit": "500", "page": "0"}, headers=auth_headers)

        assert response.status_code == 400
        assert {e["field"] for e in response.json()["errors"]} == {"limit", "page"}

    def test_list_tasks_page_too_large(self, test_client, auth_headers):
        response = test_client.get("/tasks", params={"page": "100000000000000000000"}, headers=auth_headers)

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["page"]

    @pytest.mark.parametrize("due_date", ["1700000000", "2026-01-01"])
    def test_create_task_rejects_partial_due_date(self, test_client, auth_headers, due_date):
        response = test_client.post(
            "/tasks", json={"title": "t", "dueDate": due_date}, headers=auth_headers
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["dueDate"]

    def test_get_task(self, test_client, auth_headers):
        task = _create(test_client, auth_headers, title="read me")

        response = test_client.get(f"/tasks/{task['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": task}

    def test_get_missing_task(self, test_client, auth_headers):
        response = test_client.get("/tasks/does-not-exist", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Task not found"}

    def test_partial_update(self, test_client, auth_headers):
        task = _create(
            test_client,
            auth_headers,
            title="report",
            description="quarterly",
            dueDate="2026-06-30T12:00:00Z",
        )

        response = test_client.put(f"/tasks/{task['id']}", json={"status": "completed"}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Task updated successfully"
        updated = body["data"]
        assert updated["status"] == "completed"
        for field in ["title", "description", "dueDate", "createdAt", "userId"]:
            assert updated[field] == task[field]

    def test_update_validation_error_applies_nothing(self, test_client, auth_headers):
        task = _create(test_client, auth_headers, title="stable")

        response = test_client.put(
            f"/tasks/{task['id']}",
            json={"title": "changed", "status": "bogus"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        current = test_client.get(f"/tasks/{task['id']}", headers=auth_headers).json()["data"]
        assert current["title"] == "stable"

    def test_delete_task(self, test_client, auth_headers):
        task = _create(test_client, auth_headers, title="temp")

        response = test_client.delete(f"/tasks/{task['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Task deleted successfully"}
        assert test_client.get(f"/tasks/{task['id']}", headers=auth_headers).status_code == 404


class TestOwnershipOverHttp:
    """Another account's token can never reach a task."""

    def test_foreign_task_is_not_found(self, test_client, auth_headers, other_auth_headers):
        task = _create(test_client, auth_headers, title="private")

        get = test_client.get(f"/tasks/{task['id']}", headers=other_auth_headers)
        put = test_client.put(f"/tasks/{task['id']}", json={"title": "mine now"}, headers=other_auth_headers)
        delete = test_client.delete(f"/tasks/{task['id']}", headers=other_auth_headers)

        for response in [get, put, delete]:
            assert response.status_code == 404
            assert response.json() == {"success": False, "message": "Task not found"}

        still_there = test_client.get(f"/tasks/{task['id']}", headers=auth_headers).json()["data"]
        assert still_there["title"] == "private"

    def test_listing_is_scoped(self, test_client, auth_headers, other_auth_headers):
        _create(test_client, auth_headers, title="alice's")

        response = test_client.get("/tasks", headers=other_auth_headers)

        assert response.json()["data"]["tasks"] == []

    def test_owner_cannot_be_injected(self, test_client, auth_headers):
        task = _create(test_client, auth_headers, title="t", userId="someone-else")
        credentials = test_client.app.state.server_state.credentials
        alice_id = credentials.verify(auth_headers["Authorization"].split(" ", 1)[1])["userId"]

        assert task["userId"] == alice_id


class TestErrorEnvelope:

    def test_unexpected_error_is_hidden(self, app, auth_headers, monkeypatch, caplog):
        tasks = app.state.server_state.tasks

        def explode(*args, **kwargs):
            raise RuntimeError("connection to store lost: password=hunter2")

        monkeypatch.setattr(tasks, "list", explode)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/tasks", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Internal server error"}
        assert "hunter2" not in response.text
        assert "Unhandled error on GET /tasks" in caplog.text


def test_scenario(test_client):
    """Register, log in, create, list and check isolation end to end."""
    credentials = {"email": "a@x.com", "password": "secret1"}

    assert test_client.post("/auth/register", json=credentials).status_code == 200
    assert test_client.post("/auth/register", json=credentials).status_code == 409
    assert test_client.post("/auth/login", json={"email": "a@x.com", "password": "wrong1"}).status_code == 401

    login = test_client.post("/auth/login", json=credentials)
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    created = test_client.post("/tasks", json={"title": "buy milk"}, headers=headers)
    assert created.status_code == 201
    task = created.json()["data"]
    assert task["status"] == "pending"

    listing = test_client.get("/tasks", params={"page": 1, "limit": 10}, headers=headers).json()["data"]
    assert [t["id"] for t in listing["tasks"]] == [task["id"]]
    assert listing["pagination"]["total"] == 1
    assert listing["pagination"]["hasNext"] is False

    test_client.post("/auth/register", json={"email": "b@x.com", "password": "secret2"})
    other = test_client.post("/auth/login", json={"email": "b@x.com", "password": "secret2"}).json()["token"]
    response = test_client.get(f"/tasks/{task['id']}", headers={"Authorization": f"Bearer {other}"})
    assert response.status_code == 404


def test_root_and_health(test_client):
    assert test_client.get("/").text == "Task Management API is running"

    response = test_client.get("/health")
    assert response.status_code == 200
    health = response.json()
    assert health["status"] == "healthy"
    assert health["database"] == "ok"
    assert health["timestamp"].endswith("Z")


def test_health_reports_unreachable_database(test_client, monkeypatch):
    db_manager = test_client.app.state.server_state.db_manager
    monkeypatch.setattr(db_manager, "ping", lambda: False)

    response = test_client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"
    assert response.json()["database"] == "unreachable"


def test_ping(db_manager, monkeypatch):
    assert db_manager.ping() is True

    def refuse():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    monkeypatch.setattr(db_manager.engine, "connect", refuse)

    assert db_manager.ping() is False
