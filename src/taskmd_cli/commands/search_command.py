"""Command 'search' of taskmd"""

import typer

from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.ui.console import get_console
from taskmd_cli.utils.ui.formatters import (
    format_output,
    format_tasks_by_project,
    format_tasks_table,
)

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("search")
@command_wrapper
def search_command(
    text: str | None = typer.Argument(None, help="Text anywhere in the task file"),
    status: str | None = typer.Option(None, "--status", "-s", help="Filter by status"),
    priority: str | None = typer.Option(None, "--priority", "-p", help="Filter by priority"),
    project: str | None = typer.Option(None, "--project", help="Filter by project"),
    tag: str | None = typer.Option(None, "--tag", help="Filter by tag"),
    due_before: str | None = typer.Option(
        None, "--due-before", help="Due on or before this date (YYYY-MM-DD)"
    ),
    due_after: str | None = typer.Option(
        None, "--due-after", help="Due on or after this date (YYYY-MM-DD)"
    ),
    group_by_project: bool = typer.Option(
        False, "--group-by-project", "-g", help="Group tasks by project"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """Search tasks; every given criterion must match."""
    output = get_config_service().output_format(output)
    task_service = get_task_service()
    messages = task_service.messages
    tasks = task_service.search_tasks(
        status=status,
        priority=priority,
        project=project,
        tag=tag,
        due_before=due_before,
        due_after=due_after,
        text=text,
    )

    if output != "table":
        format_output(tasks, output)
        return
    if not tasks:
        console.print(f"[yellow]{messages.t('task.none_matching')}[/yellow]")
        return

    console.print(f"[bold]{messages.t('task.found_many', count=len(tasks))}[/bold]")
    if group_by_project:
        format_tasks_by_project(tasks, messages)
    else:
        format_tasks_table(tasks, messages)
