"""Command 'start' of taskmd"""

import typer

from taskmd_cli.models import TaskStatus
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.task_helpers import resolve_task_id

from .decorators import command_wrapper
from .status_command import report_status_change

app = typer.Typer()


@app.command("start")
@command_wrapper
def start_command(
    task_id: str = typer.Argument(..., help="Task ID or a unique suffix of it"),
) -> None:
    """Start working on a todo task."""
    task_service = get_task_service()
    task, changed = task_service.change_status(
        resolve_task_id(task_service, task_id), TaskStatus.WIP
    )
    report_status_change(task_service, task, changed)
