"""Task service - Business logic for task operations.

This service layer sits between the CLI/HTTP adapters and the repository. It
owns input validation, the status transition policy, result ordering and the
"today" view.
"""

from __future__ import annotations

from typing import Any

import pydantic

from taskmd_cli.adapters.markdown import MarkdownTaskRepository, TaskStore, today_string
from taskmd_cli.models import (
    PRIORITIES,
    TaskCreate,
    TaskDetail,
    TaskFilters,
    TaskInfo,
    TaskStatus,
    TaskUpdate,
    ValidationError,
)
from taskmd_cli.repositories import TaskRepository
from taskmd_cli.utils.logger import get_logger
from taskmd_cli.utils.messages import Messages, get_messages

# Moves allowed between different statuses. Requesting the current status is
# always a successful no-op.
ALLOWED_TRANSITIONS: dict[TaskStatus, frozenset[TaskStatus]] = {
    TaskStatus.TODO: frozenset({TaskStatus.WIP}),
    TaskStatus.WIP: frozenset({TaskStatus.COMPLETED}),
    TaskStatus.COMPLETED: frozenset(),
}

_STATUS_ORDER = {status: index for index, status in enumerate(TaskStatus)}
_PRIORITY_ORDER = {priority: index for index, priority in enumerate(PRIORITIES)}


def sort_key(task: TaskInfo) -> tuple:
    """Stable ordering: status, priority (high first), due date, title."""
    return (
        _STATUS_ORDER[task.status],
        _PRIORITY_ORDER.get(task.priority, len(PRIORITIES)),
        task.due_date is None,
        task.due_date or "",
        task.title.lower(),
        str(task.path),
    )


def _first_error(error: pydantic.ValidationError) -> str:
    detail = error.errors()[0]
    location = ".".join(str(part) for part in detail.get("loc", ()))
    message = detail.get("msg", str(error))
    return f"{location}: {message}" if location else message


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the task repository.
    """

    def __init__(self, task_repository: TaskRepository, messages: Messages | None = None):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
            messages: Message catalogue for user-visible errors
        """
        self.repository = task_repository
        self.messages = messages or get_messages()
        self.logger = get_logger("service")

    def _build(self, model: type[pydantic.BaseModel], **data: Any):
        try:
            return model(**data)
        except pydantic.ValidationError as e:
            raise ValidationError(_first_error(e)) from e

    def create_task(
        self,
        title: str | None,
        *,
        description: str | None = None,
        priority: str = "medium",
        project: str | None = None,
        due_date: str | None = None,
        tags: list[str] | None = None,
    ) -> TaskInfo:
        """Create a new task in the todo state.

        Args:
            title: Task title (required)
            description: Notes section text
            priority: Priority level (high, medium, low)
            project: Project name, "default" when omitted
            due_date: Due date (YYYY-MM-DD)
            tags: List of tags

        Returns:
            Created TaskInfo
        """
        if not title or not title.strip():
            raise ValidationError(self.messages.t("error.title_required"))
        task_data = self._build(
            TaskCreate,
            title=title,
            description=description,
            priority=priority or "medium",
            project=project or "default",
            due_date=due_date or None,
            tags=tags or [],
        )
        task = self.repository.add(task_data)
        self.logger.info("task created: %s (%s)", task.id, task.path)
        return task

    def get_task(self, task_id: str) -> TaskDetail:
        """Get a task by id, including its notes."""
        return self.repository.get(task_id)

    def search_tasks(
        self,
        *,
        status: str | None = None,
        priority: str | None = None,
        project: str | None = None,
        tag: str | None = None,
        due_before: str | None = None,
        due_after: str | None = None,
        text: str | None = None,
    ) -> list[TaskInfo]:
        """Search tasks; every given criterion must match.

        Returns:
            Matching tasks sorted by status, priority, due date and title
        """
        if status == "all":
            status = None
        filters = self._build(
            TaskFilters,
            status=status or None,
            priority=priority or None,
            project=project or None,
            tag=tag or None,
            due_before=due_before or None,
            due_after=due_after or None,
            text=text or None,
        )
        return sorted(self.repository.list_all(filters), key=sort_key)

    def list_tasks(
        self,
        status: str | None = None,
        *,
        priority: str | None = None,
        project: str | None = None,
        tag: str | None = None,
    ) -> list[TaskInfo]:
        """List tasks, optionally narrowed by status, priority, project or tag."""
        return self.search_tasks(status=status, priority=priority, project=project, tag=tag)

    def get_all_tasks(self) -> dict[str, list[TaskInfo]]:
        """All tasks grouped by status."""
        grouped: dict[str, list[TaskInfo]] = {status.value: [] for status in TaskStatus}
        for task in self.search_tasks():
            grouped[task.status.value].append(task)
        return grouped

    def update_task(self, task_id: str, **fields: Any) -> TaskInfo:
        """Apply a partial update.

        Only the keyword arguments actually passed are applied; pass
        ``due_date=None`` to clear the due date.

        Raises:
            ValidationError: If nothing would be updated
        """
        updates = self._build(TaskUpdate, **fields)
        if updates.is_empty():
            raise ValidationError(self.messages.t("error.empty_update"))
        return self.repository.update(task_id, updates)

    def delete_task(self, task_id: str) -> TaskInfo:
        """Delete a task and return what was removed."""
        task = self.repository.delete(task_id)
        self.logger.info("task deleted: %s", task_id)
        return task

    def change_status(self, task_id: str, new_status: str) -> tuple[TaskInfo, bool]:
        """Move a task to *new_status* if the transition policy allows it.

        Returns:
            Tuple of (task after the call, whether it moved)

        Raises:
            ValidationError: If the status is unknown or the move is illegal
            NotFoundError: If no task has this id
        """
        try:
            target = TaskStatus(new_status)
        except ValueError as e:
            raise ValidationError(
                self.messages.t("error.unknown_status", status=new_status)
            ) from e

        current = self.repository.get(task_id)
        if current.status == target:
            return current, False
        if target not in ALLOWED_TRANSITIONS[current.status]:
            raise ValidationError(
                self.messages.t(
                    "error.illegal_transition",
                    current=self.messages.status_label(current.status),
                    target=self.messages.status_label(target),
                )
            )

        task = self.repository.move(task_id, target)
        self.logger.info("task %s: %s -> %s", task_id, current.status, target)
        return task, True

    def start_task(self, task_id: str) -> TaskInfo:
        """Move a todo task to wip."""
        task, _ = self.change_status(task_id, TaskStatus.WIP)
        return task

    def complete_task(self, task_id: str) -> TaskInfo:
        """Move a wip task to completed."""
        task, _ = self.change_status(task_id, TaskStatus.COMPLETED)
        return task

    def get_today_tasks(
        self, include_overdue: bool = False, today: str | None = None
    ) -> list[TaskInfo]:
        """Tasks to look at today.

        Todo tasks due today plus everything in progress; with
        *include_overdue*, todo tasks whose due date has passed too.
        """
        today = today or today_string()
        tasks = []
        for task in self.search_tasks():
            if task.status is TaskStatus.WIP:
                tasks.append(task)
            elif task.status is TaskStatus.TODO and task.due_date:
                if task.due_date == today or (include_overdue and task.due_date < today):
                    tasks.append(task)
        return tasks


def get_task_service() -> TaskService:
    """Factory function to get a TaskService for the configured task tree."""
    from taskmd_cli.services.config_service import get_config_service

    config_service = get_config_service()
    messages = get_messages(config_service.language)
    repository = MarkdownTaskRepository(
        TaskStore(config_service.resolve_root()),
        messages=messages,
        template=config_service.load_template(),
    )
    return TaskService(repository, messages)
