"""Command 'delete' of taskmd"""

import typer

from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.task_helpers import resolve_task_id
from taskmd_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete_command(
    task_id: str = typer.Argument(..., help="Task ID or a unique suffix of it"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a task file."""
    task_service = get_task_service()
    messages = task_service.messages
    resolved_id = resolve_task_id(task_service, task_id)

    if not force:
        task = task_service.get_task(resolved_id)
        if not typer.confirm(messages.t("prompt.delete", title=task.title)):
            format_info(messages.t("info.cancelled"))
            raise typer.Exit(0)

    task = task_service.delete_task(resolved_id)
    format_success(messages.t("task.deleted", title=task.title))
