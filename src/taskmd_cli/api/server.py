"""HTTP adapter for taskmd.

Every task operation is one JSON ``POST`` endpoint. Successful responses
look like ``{"success": true, "message": ..., "task"|"tasks"|"data": ...}``;
failures like ``{"success": false, "message": ...}`` with a 4xx/5xx status.
"""

from __future__ import annotations

import time
from typing import Any

import pydantic
from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from taskmd_cli import __version__
from taskmd_cli.api.schemas import (
    ChangeStatusRequest,
    CreateTaskRequest,
    SearchTasksRequest,
    TaskIdRequest,
    TodayTasksRequest,
    UpdateTaskRequest,
    function_schema,
)
from taskmd_cli.models import (
    MalformedDocumentError,
    NotFoundError,
    TaskInfo,
    TaskMdError,
    ValidationError,
)
from taskmd_cli.services.dashboard_service import DashboardService
from taskmd_cli.services.task_service import TaskService
from taskmd_cli.utils.logger import get_logger

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


def _task_json(task: TaskInfo) -> dict[str, Any]:
    return task.model_dump(mode="json")


def _parse(model: type[pydantic.BaseModel]):
    return model.model_validate(request.get_json(silent=True) or {})


def _ok(message: str, **payload: Any):
    return jsonify({"success": True, "message": message, **payload})


def _fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def create_app(
    service: TaskService | None = None,
    dashboard: DashboardService | None = None,
) -> Flask:
    """Build the Flask application.

    Args:
        service: Task service to expose; the configured one when omitted
        dashboard: Dashboard service; built over the task service's repository
            when omitted
    """
    if service is None:
        from taskmd_cli.services.task_service import get_task_service

        service = get_task_service()
    dashboard = dashboard or DashboardService(service.repository)
    messages = service.messages
    logger = get_logger("http")

    app = Flask(__name__)
    app.json.ensure_ascii = False

    @app.before_request
    def _start_timer():
        g.started = time.monotonic()

    @app.after_request
    def _finish(response):
        response.headers.update(CORS_HEADERS)
        elapsed = time.monotonic() - g.get("started", time.monotonic())
        logger.info(
            "http %s %s -> %s (%.3fs)",
            request.method,
            request.path,
            response.status_code,
            elapsed,
        )
        return response

    # -- error mapping ---------------------------------------------------

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return _fail(str(e), 404)

    @app.errorhandler(ValidationError)
    @app.errorhandler(MalformedDocumentError)
    def _bad_request(e: TaskMdError):
        return _fail(str(e), 400)

    @app.errorhandler(pydantic.ValidationError)
    def _bad_body(e: pydantic.ValidationError):
        detail = e.errors()[0]
        location = ".".join(str(part) for part in detail.get("loc", ()))
        return _fail(f"{location}: {detail['msg']}" if location else detail["msg"], 400)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return _fail(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("http %s %s failed", request.method, request.path)
        return _fail(messages.t("error.unexpected", error=e), 500)

    # -- routes ----------------------------------------------------------

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "version": __version__})

    @app.get("/mcp-schema")
    def mcp_schema():
        return jsonify(function_schema())

    @app.post("/tasks/create")
    def create_task():
        body = _parse(CreateTaskRequest)
        task = service.create_task(
            body.title,
            description=body.description,
            priority=body.priority,
            project=body.project,
            due_date=body.due_date,
            tags=body.tags,
        )
        return _ok(messages.t("task.created", title=task.title), task=_task_json(task))

    @app.post("/tasks/list")
    @app.post("/tasks/search", endpoint="search_tasks")
    def list_tasks():
        body = _parse(SearchTasksRequest)
        tasks = service.search_tasks(**body.model_dump())
        return _ok(
            messages.t("task.found_many", count=len(tasks)),
            tasks=[_task_json(task) for task in tasks],
        )

    @app.post("/tasks/get")
    def get_task():
        body = _parse(TaskIdRequest)
        task = service.get_task(body.task_id)
        return _ok(messages.t("task.found"), task=_task_json(task))

    @app.post("/tasks/update")
    def update_task():
        body = _parse(UpdateTaskRequest)
        fields = body.model_dump(exclude_unset=True, exclude={"task_id"})
        task = service.update_task(body.task_id, **fields)
        title = body.title or task.title
        return _ok(messages.t("task.updated", title=title), task=_task_json(task))

    @app.post("/tasks/change-status")
    def change_status():
        body = _parse(ChangeStatusRequest)
        task, changed = service.change_status(body.task_id, body.new_status)
        key = "task.status_changed" if changed else "task.status_unchanged"
        message = messages.t(
            key, title=task.title, status=messages.status_label(task.status)
        )
        return _ok(message, task=_task_json(task))

    @app.post("/tasks/complete")
    def complete_task():
        body = _parse(TaskIdRequest)
        task = service.complete_task(body.task_id)
        message = messages.t(
            "task.status_changed",
            title=task.title,
            status=messages.status_label(task.status),
        )
        return _ok(message, task=_task_json(task))

    @app.post("/tasks/delete")
    def delete_task():
        body = _parse(TaskIdRequest)
        task = service.delete_task(body.task_id)
        return _ok(messages.t("task.deleted", title=task.title), task=_task_json(task))

    @app.post("/tasks/today")
    def today_tasks():
        body = _parse(TodayTasksRequest)
        tasks = service.get_today_tasks(include_overdue=body.include_overdue)
        return _ok(
            messages.t("task.today", count=len(tasks)),
            tasks=[_task_json(task) for task in tasks],
        )

    @app.get("/dashboard")
    def get_dashboard():
        data = dashboard.build()
        return jsonify({"success": True, "data": data.model_dump(mode="json")})

    return app
