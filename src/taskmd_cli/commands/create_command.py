"""Command 'create' of taskmd"""

from datetime import date

import typer

from taskmd_cli.models import PRIORITIES
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.task_helpers import parse_tags
from taskmd_cli.utils.ui.console import get_console
from taskmd_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


def _prompt_due(messages) -> str | None:
    due = typer.prompt(messages.t("prompt.due"), default="", show_default=False).strip()
    if not due:
        return None
    try:
        date.fromisoformat(due)
    except ValueError:
        format_info(messages.t("info.invalid_due"))
        return None
    return due


@app.command("create")
@command_wrapper
def create_command(
    title: str | None = typer.Argument(None, help="Task title (prompted when omitted)"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Notes for the task"
    ),
    priority: str = typer.Option("medium", "--priority", "-p", help="high, medium or low"),
    project: str | None = typer.Option(None, "--project", help="Project name"),
    due: str | None = typer.Option(None, "--due", help="Due date (YYYY-MM-DD)"),
    tags: str | None = typer.Option(None, "--tags", help="Comma-separated tags"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Create a new task in the todo list."""
    task_service = get_task_service()
    messages = task_service.messages

    if title is None:
        # Interactive mode: ask for everything not given on the command line
        title = typer.prompt(messages.t("prompt.title"))
        if description is None:
            description = typer.prompt(
                messages.t("prompt.description"), default="", show_default=False
            )
        answer = typer.prompt(messages.t("prompt.priority"), default=priority).strip().lower()
        priority = answer if answer in PRIORITIES else "medium"
        if project is None:
            project = typer.prompt(messages.t("prompt.project"), default="default")
        if due is None:
            due = _prompt_due(messages)
        if tags is None:
            tags = typer.prompt(messages.t("prompt.tags"), default="", show_default=False)

    task = task_service.create_task(
        title,
        description=description or None,
        priority=priority,
        project=project,
        due_date=due,
        tags=parse_tags(tags),
    )

    format_success(messages.t("task.created", title=task.title))
    console.print(f"[bold cyan]ID:[/bold cyan] {task.id}")
    console.print(f"[dim]{task.path}[/dim]")
    if output != "table":
        format_output(task, output)
