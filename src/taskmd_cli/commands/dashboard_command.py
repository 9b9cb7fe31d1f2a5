"""Command 'dashboard' of taskmd"""

import typer

from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.services.dashboard_service import get_dashboard_service
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.ui.formatters import format_dashboard, format_output

from .decorators import command_wrapper

app = typer.Typer()


@app.command("dashboard")
@command_wrapper
def dashboard_command(
    output: str | None = typer.Option(
        None, "--output", "-o", help="table, json or yaml (default: output.format)"
    ),
) -> None:
    """Show task counts, overdue tasks and recent completions."""
    output = get_config_service().output_format(output)
    data = get_dashboard_service().build()
    if output != "table":
        format_output(data, output)
    else:
        format_dashboard(data, get_task_service().messages)
