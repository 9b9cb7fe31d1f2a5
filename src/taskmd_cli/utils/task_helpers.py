"""Task helper utilities."""

from __future__ import annotations

from taskmd_cli.models import NotFoundError, ValidationError
from taskmd_cli.services.task_service import TaskService


def resolve_task_id(task_service: TaskService, task_id_or_suffix: str) -> str:
    """
    Resolve a task ID or a unique suffix of one to the full task ID.

    Args:
        task_service: The task service instance
        task_id_or_suffix: Full task ID or suffix to resolve

    Returns:
        The full task ID

    Raises:
        NotFoundError: If no task ID ends with the given text
        ValidationError: If the suffix matches more than one task
    """
    task_ids = [task.id for task in task_service.search_tasks()]
    if task_id_or_suffix in task_ids:
        return task_id_or_suffix

    matches = sorted({tid for tid in task_ids if tid.endswith(task_id_or_suffix)})
    messages = task_service.messages
    if not matches:
        raise NotFoundError(messages.t("error.not_found", task_id=task_id_or_suffix))
    if len(matches) > 1:
        raise ValidationError(
            messages.t(
                "error.ambiguous_id",
                task_id=task_id_or_suffix,
                matches=", ".join(matches),
            )
        )
    return matches[0]


def parse_tags(value: str | None) -> list[str] | None:
    """Split a comma-separated tag option; None when the option was not given."""
    if value is None:
        return None
    return [tag.strip() for tag in value.split(",") if tag.strip()]
