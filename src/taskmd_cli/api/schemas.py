"""Request bodies accepted by the HTTP adapter.

The same models validate incoming JSON and produce the function schema
served at ``/mcp-schema``.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from taskmd_cli.models import TaskPriority, TaskStatus, check_single_line


class CreateTaskRequest(BaseModel):
    title: str = Field(description="Task title")
    description: str | None = Field(default=None, description="Task notes")
    priority: TaskPriority = Field(default="medium", description="Task priority")
    project: str | None = Field(default=None, description="Project the task belongs to")
    due_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("due_date", "dueDate"),
        description="Due date (YYYY-MM-DD)",
    )
    tags: list[str] = Field(default_factory=list, description="Tags attached to the task")

    @field_validator("title", "project")
    @classmethod
    def single_line(cls, v: str | None) -> str | None:
        return v if v is None else check_single_line(v)


class SearchTasksRequest(BaseModel):
    status: TaskStatus | None = Field(default=None, description="Task status")
    priority: TaskPriority | None = Field(default=None, description="Task priority")
    project: str | None = Field(default=None, description="Project name")
    tag: str | None = Field(default=None, description="Tag the task must carry")
    due_before: str | None = Field(
        default=None, description="Only tasks due on or before this date (YYYY-MM-DD)"
    )
    due_after: str | None = Field(
        default=None, description="Only tasks due on or after this date (YYYY-MM-DD)"
    )
    text: str | None = Field(
        default=None, description="Text contained anywhere in the task file"
    )


class TaskIdRequest(BaseModel):
    task_id: str = Field(description="Task identifier")


class UpdateTaskRequest(TaskIdRequest):
    title: str | None = Field(default=None, description="New title")
    description: str | None = Field(default=None, description="New notes")
    priority: TaskPriority | None = Field(default=None, description="New priority")
    due_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("due_date", "dueDate"),
        description="New due date (YYYY-MM-DD), null to clear",
    )
    tags: list[str] | None = Field(default=None, description="Replacement tag list")

    @field_validator("title")
    @classmethod
    def single_line(cls, v: str | None) -> str | None:
        return v if v is None else check_single_line(v)


class ChangeStatusRequest(TaskIdRequest):
    new_status: TaskStatus = Field(description="Target status")


class TodayTasksRequest(BaseModel):
    include_overdue: bool = Field(
        default=False, description="Also return todo tasks past their due date"
    )


# (function name, HTTP path, request model, description)
FUNCTIONS: list[tuple[str, str, type[BaseModel] | None, str]] = [
    ("create_task", "/tasks/create", CreateTaskRequest, "Create a new task"),
    ("list_tasks", "/tasks/list", SearchTasksRequest, "List tasks"),
    ("search_tasks", "/tasks/search", SearchTasksRequest, "Search tasks matching criteria"),
    ("get_task", "/tasks/get", TaskIdRequest, "Get a task by id"),
    ("update_task", "/tasks/update", UpdateTaskRequest, "Update fields of a task"),
    ("change_status", "/tasks/change-status", ChangeStatusRequest, "Change the status of a task"),
    ("complete_task", "/tasks/complete", TaskIdRequest, "Complete a task in progress"),
    ("delete_task", "/tasks/delete", TaskIdRequest, "Delete a task"),
    ("get_today_tasks", "/tasks/today", TodayTasksRequest, "Get tasks to work on today"),
    ("get_dashboard", "/dashboard", None, "Get dashboard figures"),
]


def function_schema() -> dict[str, Any]:
    """Describe every endpoint as a callable function with JSON-schema parameters."""
    functions = []
    for name, path, model, description in FUNCTIONS:
        if model is None:
            parameters: dict[str, Any] = {"type": "object", "properties": {}}
        else:
            parameters = model.model_json_schema()
            parameters.pop("title", None)
        functions.append(
            {
                "name": name,
                "path": path,
                "description": description,
                "parameters": parameters,
            }
        )
    return {"functions": functions}
