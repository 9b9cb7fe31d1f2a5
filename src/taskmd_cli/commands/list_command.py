"""Command 'list' of taskmd"""

import typer

from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.ui.formatters import (
    format_output,
    format_tasks_by_project,
    format_tasks_table,
)

from .decorators import command_wrapper

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_command(
    status: str = typer.Argument("all", help="todo, wip, completed or all"),
    priority: str | None = typer.Option(None, "--priority", "-p", help="Filter by priority"),
    project: str | None = typer.Option(None, "--project", help="Filter by project"),
    tag: str | None = typer.Option(None, "--tag", help="Filter by tag"),
    group_by_project: bool = typer.Option(
        False, "--group-by-project", "-g", help="Group tasks by project"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """List tasks."""
    output = get_config_service().output_format(output)
    task_service = get_task_service()
    tasks = task_service.list_tasks(status, priority=priority, project=project, tag=tag)

    if output != "table":
        format_output(tasks, output)
    elif group_by_project:
        format_tasks_by_project(tasks, task_service.messages)
    else:
        format_tasks_table(tasks, task_service.messages)
