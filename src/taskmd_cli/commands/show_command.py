"""Command 'show' of taskmd"""

import typer

from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.task_helpers import resolve_task_id
from taskmd_cli.utils.ui.formatters import format_output, format_task_detail

from .decorators import command_wrapper

app = typer.Typer()


@app.command("show")
@command_wrapper
def show_command(
    task_id: str = typer.Argument(..., help="Task ID or a unique suffix of it"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """Show a task with its notes."""
    output = get_config_service().output_format(output)
    task_service = get_task_service()
    task = task_service.get_task(resolve_task_id(task_service, task_id))

    if output != "table":
        format_output(task, output)
    else:
        format_task_detail(task, task_service.messages)
