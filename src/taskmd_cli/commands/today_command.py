"""Command 'today' of taskmd"""

import typer

from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.ui.console import get_console
from taskmd_cli.utils.ui.formatters import format_output, format_tasks_table

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("today")
@command_wrapper
def today_command(
    include_overdue: bool = typer.Option(
        False, "--include-overdue", help="Also show todo tasks past their due date"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """Show tasks due today and everything in progress."""
    output = get_config_service().output_format(output)
    task_service = get_task_service()
    tasks = task_service.get_today_tasks(include_overdue=include_overdue)

    if output != "table":
        format_output(tasks, output)
        return

    console.print(f"[bold]{task_service.messages.t('task.today', count=len(tasks))}[/bold]")
    format_tasks_table(tasks, task_service.messages)
