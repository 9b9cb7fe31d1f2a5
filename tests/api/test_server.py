"""Tests for the Flask HTTP adapter, using Flask's test client."""

from __future__ import annotations

import pytest

from taskmd_cli import __version__
from taskmd_cli.adapters.markdown import today_string
from taskmd_cli.api.server import create_app


@pytest.fixture()
def client(task_service):
    app = create_app(task_service)
    app.config["TESTING"] = True
    return app.test_client()


def _create(client, **body):
    body.setdefault("title", "Write report")
    response = client.post("/tasks/create", json=body)
    assert response.status_code == 200, response.get_json()
    return response.get_json()["task"]


class TestHousekeeping:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "version": __version__}

    def test_cors_headers(self, client):
        response = client.get("/health")
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert "Content-Type" in response.headers["Access-Control-Allow-Headers"]

    def test_preflight(self, client):
        response = client.options("/tasks/create")
        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_mcp_schema(self, client):
        functions = client.get("/mcp-schema").get_json()["functions"]
        by_name = {f["name"]: f for f in functions}
        create = by_name["create_task"]["parameters"]
        assert create["required"] == ["title"]
        assert set(create["properties"]) >= {"title", "priority", "due_date", "tags"}
        assert by_name["change_status"]["path"] == "/tasks/change-status"

    def test_unknown_route(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.get_json()["success"] is False


class TestTaskEndpoints:
    def test_create(self, client):
        response = client.post(
            "/tasks/create",
            json={
                "title": "Write report",
                "priority": "high",
                "project": "Docs",
                "dueDate": "2025-06-01",
                "tags": ["writing"],
            },
        )
        body = response.get_json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["message"] == 'Task "Write report" created'
        assert body["task"]["status"] == "todo"
        assert body["task"]["due_date"] == "2025-06-01"
        assert body["task"]["tags"] == ["writing"]

    def test_create_without_title(self, client):
        response = client.post("/tasks/create", json={"priority": "high"})
        assert response.status_code == 400
        assert response.get_json()["success"] is False

    def test_create_blank_title(self, client):
        response = client.post("/tasks/create", json={"title": "  "})
        assert response.status_code == 400
        assert response.get_json()["message"] == "Title is required"

    def test_create_multi_line_title(self, client):
        response = client.post("/tasks/create", json={"title": "a\n---\nb"})
        assert response.status_code == 400
        assert "single line" in response.get_json()["message"]
        assert client.post("/tasks/list", json={}).get_json()["tasks"] == []

    def test_list_and_search(self, client):
        _create(client, title="Alpha", priority="high")
        _create(client, title="Beta", priority="low")

        listed = client.post("/tasks/list", json={}).get_json()
        assert [t["title"] for t in listed["tasks"]] == ["Alpha", "Beta"]

        found = client.post("/tasks/search", json={"priority": "low"}).get_json()
        assert [t["title"] for t in found["tasks"]] == ["Beta"]
        assert found["message"] == "1 task(s) found"

    def test_list_without_body(self, client):
        response = client.post("/tasks/list")
        assert response.status_code == 200
        assert response.get_json()["tasks"] == []

    def test_get(self, client):
        task = _create(client, description="Outline")
        body = client.post("/tasks/get", json={"task_id": task["id"]}).get_json()
        assert body["task"]["description"] == "Outline"

    def test_get_unknown(self, client):
        response = client.post("/tasks/get", json={"task_id": "task-missing"})
        assert response.status_code == 404
        assert response.get_json() == {
            "success": False,
            "message": 'Task "task-missing" not found',
        }

    def test_update(self, client):
        task = _create(client, dueDate="2025-06-01")
        body = client.post(
            "/tasks/update", json={"task_id": task["id"], "priority": "high", "dueDate": None}
        ).get_json()
        assert body["task"]["priority"] == "high"
        assert body["task"]["due_date"] is None

    def test_update_title_message(self, client):
        task = _create(client)
        body = client.post(
            "/tasks/update", json={"task_id": task["id"], "title": "Write summary"}
        ).get_json()
        assert body["success"] is True
        assert body["message"] == 'Task "Write summary" updated'

    def test_empty_update(self, client):
        task = _create(client)
        response = client.post("/tasks/update", json={"task_id": task["id"]})
        assert response.status_code == 400

    def test_status_lifecycle(self, client):
        task = _create(client)

        response = client.post("/tasks/complete", json={"task_id": task["id"]})
        assert response.status_code == 400

        body = client.post(
            "/tasks/change-status", json={"task_id": task["id"], "new_status": "wip"}
        ).get_json()
        assert body["task"]["status"] == "wip"

        body = client.post(
            "/tasks/change-status", json={"task_id": task["id"], "new_status": "wip"}
        ).get_json()
        assert body["success"] is True
        assert "already" in body["message"]

        body = client.post("/tasks/complete", json={"task_id": task["id"]}).get_json()
        assert body["task"]["status"] == "completed"
        assert body["task"]["completed_date"] == today_string()

    def test_invalid_status(self, client):
        task = _create(client)
        response = client.post(
            "/tasks/change-status", json={"task_id": task["id"], "new_status": "done"}
        )
        assert response.status_code == 400

    def test_delete(self, client):
        task = _create(client)
        body = client.post("/tasks/delete", json={"task_id": task["id"]}).get_json()
        assert body["message"] == 'Task "Write report" deleted'
        assert client.post("/tasks/delete", json={"task_id": task["id"]}).status_code == 404

    def test_today(self, client, task_service):
        _create(client, title="Due today", dueDate=today_string())
        _create(client, title="Overdue", dueDate="2000-01-01")

        body = client.post("/tasks/today", json={}).get_json()
        assert [t["title"] for t in body["tasks"]] == ["Due today"]

        body = client.post("/tasks/today", json={"include_overdue": True}).get_json()
        assert {t["title"] for t in body["tasks"]} == {"Due today", "Overdue"}

    def test_dashboard(self, client):
        _create(client, priority="high")
        body = client.get("/dashboard").get_json()
        assert body["success"] is True
        assert body["data"]["task_counts"]["todo"] == 1
        assert body["data"]["priority_counts"]["high"] == 1


def test_unexpected_errors_become_500(task_service):
    app = create_app(task_service)
    task_service.repository.list_all = lambda filters=None: 1 / 0

    response = app.test_client().post("/tasks/list", json={})
    assert response.status_code == 500
    assert response.get_json()["success"] is False
