"""Repository abstraction layer for taskmd.

This module defines the abstract base class (interface) for task persistence,
following the Ports & Adapters pattern. The service layer only talks to this
interface; ``taskmd_cli.adapters.markdown`` provides the file-backed adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from taskmd_cli.models import (
    TaskCreate,
    TaskDetail,
    TaskFilters,
    TaskInfo,
    TaskLocation,
    TaskStatus,
    TaskUpdate,
)


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def list_all(self, filters: TaskFilters | None = None) -> list[TaskInfo]:
        """List tasks matching *filters*.

        Args:
            filters: TaskFilters object specifying filter criteria

        Returns:
            List of TaskInfo objects in storage order
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )

    @abstractmethod
    def locate(self, task_id: str) -> TaskLocation:
        """Find where the task with *task_id* is stored.

        Raises:
            NotFoundError: If no task has this id
        """
        raise NotImplementedError(
            "TaskRepository.locate() must be implemented by adapter"
        )

    @abstractmethod
    def get(self, task_id: str) -> TaskDetail:
        """Get a task with its notes.

        Raises:
            NotFoundError: If no task has this id
        """
        raise NotImplementedError("TaskRepository.get() must be implemented by adapter")

    @abstractmethod
    def add(self, task_data: TaskCreate) -> TaskInfo:
        """Create a new task in the todo state.

        Raises:
            TaskIOError: If the task cannot be written
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def update(self, task_id: str, updates: TaskUpdate) -> TaskInfo:
        """Apply a partial update to a task.

        Raises:
            NotFoundError: If no task has this id
            MalformedDocumentError: If the document has no front matter
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def move(self, task_id: str, status: TaskStatus) -> TaskInfo:
        """Move a task to *status* without any legality check.

        Raises:
            NotFoundError: If no task has this id
        """
        raise NotImplementedError("TaskRepository.move() must be implemented by adapter")

    @abstractmethod
    def delete(self, task_id: str) -> TaskInfo:
        """Delete a task and return what was removed.

        Raises:
            NotFoundError: If no task has this id
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )
