"""Dashboard service - read-only aggregation over every task."""

from __future__ import annotations

from collections import Counter

from taskmd_cli.adapters.markdown import today_string
from taskmd_cli.models import (
    PRIORITIES,
    CompletedEntry,
    DashboardData,
    TaskInfo,
    TaskStatus,
)
from taskmd_cli.repositories import TaskRepository

RECENTLY_COMPLETED_LIMIT = 5


class DashboardService:
    """Computes dashboard figures from the repository. Never writes."""

    def __init__(self, task_repository: TaskRepository):
        self.repository = task_repository

    def build(self, today: str | None = None) -> DashboardData:
        """Aggregate counts for the dashboard.

        Overdue and due-today counts only consider todo tasks and compare
        ``due_date`` with *today* as strings. Recently completed tasks are
        ordered by their completion directory date, newest first.

        Args:
            today: Reference date (YYYY-MM-DD), defaults to today in UTC
        """
        today = today or today_string()
        tasks = self.repository.list_all()

        status_counts = Counter(task.status.value for task in tasks)
        task_counts = {status.value: status_counts.get(status.value, 0) for status in TaskStatus}
        task_counts["total"] = len(tasks)

        priority_counter = Counter(task.priority for task in tasks)
        priority_counts = {priority: priority_counter.get(priority, 0) for priority in PRIORITIES}

        project_counts = dict(Counter(task.project for task in tasks if task.project))

        todo_due = [
            task.due_date
            for task in tasks
            if task.status is TaskStatus.TODO and task.due_date
        ]
        overdue_count = sum(1 for due in todo_due if due < today)
        due_today_count = sum(1 for due in todo_due if due == today)

        return DashboardData(
            task_counts=task_counts,
            priority_counts=priority_counts,
            project_counts=project_counts,
            overdue_count=overdue_count,
            due_today_count=due_today_count,
            recently_completed=self._recently_completed(tasks),
        )

    @staticmethod
    def _recently_completed(tasks: list[TaskInfo]) -> list[CompletedEntry]:
        completed = [
            task
            for task in tasks
            if task.status is TaskStatus.COMPLETED and task.completed_date
        ]
        completed.sort(key=lambda task: (task.completed_date, task.title), reverse=True)
        return [
            CompletedEntry(title=task.title, completed_date=task.completed_date)
            for task in completed[:RECENTLY_COMPLETED_LIMIT]
        ]


def get_dashboard_service() -> DashboardService:
    """Factory function to get a DashboardService for the configured task tree."""
    from taskmd_cli.services.task_service import get_task_service

    return DashboardService(get_task_service().repository)
