"""Task data models."""

from __future__ import annotations

import re
from datetime import date
from enum import StrEnum
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

TaskPriority = Literal["high", "medium", "low"]

PRIORITIES: tuple[str, ...] = ("high", "medium", "low")


class TaskStatus(StrEnum):
    """Lifecycle status of a task, encoded by the directory holding its file."""

    TODO = "todo"
    WIP = "wip"
    COMPLETED = "completed"


# Control characters and line separators; front-matter values are one line each.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f\x85\u2028\u2029]")


def check_single_line(value: str) -> str:
    """Reject values that would not fit on one front-matter line."""
    if _CONTROL_CHARS.search(value):
        raise ValueError("must be a single line without control characters")
    return value


def _check_iso_date(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    try:
        date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"invalid date '{value}', expected YYYY-MM-DD") from e
    return value


class TaskMetadata(BaseModel):
    """Decoded front matter of a task document.

    Attributes:
        title: Task title (defaults to the file stem when missing)
        id: Identifier assigned once at creation
        priority: Priority level (high, medium, low)
        project: Project name
        due_date: Optional due date (YYYY-MM-DD)
        created_at: Creation date (YYYY-MM-DD)
        tags: Ordered tag list, duplicates preserved

    Keys not listed above are kept as model extras.
    """

    model_config = ConfigDict(extra="allow")

    title: str
    id: str = "unknown"
    priority: TaskPriority = "medium"
    project: str = "default"
    due_date: str | None = None
    created_at: str = ""
    tags: list[str] = Field(default_factory=list)


class TaskLocation(BaseModel):
    """Where a task document currently lives.

    Attributes:
        path: Path of the Markdown file
        status: Status derived from the containing directory
        completed_date: Name of the completion date directory (completed only)
    """

    path: Path
    status: TaskStatus
    completed_date: str | None = None


class TaskInfo(TaskMetadata):
    """Task metadata combined with its location."""

    status: TaskStatus
    completed_date: str | None = None
    path: Path


class TaskDetail(TaskInfo):
    """Task info plus the text of its notes section."""

    description: str = ""


class TaskCreate(BaseModel):
    """Model for creating a new task.

    Attributes:
        title: Task title (required, non-blank)
        description: Initial notes section text
        priority: Priority level
        project: Project name
        due_date: Optional due date (YYYY-MM-DD)
        tags: Tag list
    """

    title: str
    description: str | None = None
    priority: TaskPriority = "medium"
    project: str = "default"
    due_date: str | None = Field(
        default=None, validation_alias=AliasChoices("due_date", "dueDate")
    )
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("title cannot be empty")
        return check_single_line(v.strip())

    @field_validator("project")
    @classmethod
    def default_project(cls, v: str) -> str:
        return check_single_line(v.strip()) or "default"

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        return _check_iso_date(v)


class TaskUpdate(BaseModel):
    """Model for updating an existing task.

    Only fields that were explicitly provided are applied. Passing
    ``due_date=None`` explicitly clears the due date.

    Attributes:
        title: New title (written to the body heading)
        description: New notes section text
        priority: New priority
        due_date: New due date, or None to clear it
        tags: Replacement tag list
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    priority: TaskPriority | None = None
    due_date: str | None = Field(
        default=None, validation_alias=AliasChoices("due_date", "dueDate")
    )
    tags: list[str] | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not v.strip():
            raise ValueError("title cannot be empty")
        return check_single_line(v.strip())

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: str | None) -> str | None:
        return _check_iso_date(v)

    def provided(self) -> set[str]:
        """Names of the fields that carry an update."""
        fields = set()
        for name in self.model_fields_set:
            if name == "due_date" or getattr(self, name) is not None:
                fields.add(name)
        return fields

    def is_empty(self) -> bool:
        return not self.provided()


class TaskFilters(BaseModel):
    """Search criteria for tasks.

    Attributes:
        status: Filter by status
        priority: Filter by priority
        project: Filter by project (exact match)
        tag: Filter by tag membership
        due_before: Tasks due on or before this date
        due_after: Tasks due on or after this date
        text: Case-insensitive substring of the raw file content
    """

    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    project: str | None = None
    tag: str | None = None
    due_before: str | None = None
    due_after: str | None = None
    text: str | None = None

    @field_validator("due_before", "due_after")
    @classmethod
    def validate_dates(cls, v: str | None) -> str | None:
        return _check_iso_date(v)


class CompletedEntry(BaseModel):
    """A recently completed task on the dashboard."""

    title: str
    completed_date: str


class DashboardData(BaseModel):
    """Read-side aggregation over every task."""

    task_counts: dict[str, int]
    priority_counts: dict[str, int]
    project_counts: dict[str, int]
    overdue_count: int = 0
    due_today_count: int = 0
    recently_completed: list[CompletedEntry] = Field(default_factory=list)
