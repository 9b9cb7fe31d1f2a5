"""Command 'status' of taskmd"""

import typer

from taskmd_cli.models import TaskInfo
from taskmd_cli.services.task_service import TaskService, get_task_service
from taskmd_cli.utils.task_helpers import resolve_task_id
from taskmd_cli.utils.ui.console import get_console
from taskmd_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


def report_status_change(task_service: TaskService, task: TaskInfo, changed: bool) -> None:
    """Print the outcome of a status change."""
    messages = task_service.messages
    status = messages.status_label(task.status)
    if changed:
        format_success(messages.t("task.status_changed", title=task.title, status=status))
        console.print(f"[dim]{task.path}[/dim]")
    else:
        format_info(messages.t("task.status_unchanged", title=task.title, status=status))


@app.command("status")
@command_wrapper
def status_command(
    task_id: str = typer.Argument(..., help="Task ID or a unique suffix of it"),
    new_status: str = typer.Argument(..., help="todo, wip or completed"),
) -> None:
    """Change the status of a task (todo -> wip -> completed)."""
    task_service = get_task_service()
    task, changed = task_service.change_status(
        resolve_task_id(task_service, task_id), new_status
    )
    report_status_change(task_service, task, changed)
