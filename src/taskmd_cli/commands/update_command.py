"""Command 'update' of taskmd"""

import typer

from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.exit_codes import ERROR_INVALID_ARGS
from taskmd_cli.utils.task_helpers import parse_tags, resolve_task_id
from taskmd_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer()


@app.command("update")
@command_wrapper
def update_command(
    task_id: str = typer.Argument(..., help="Task ID or a unique suffix of it"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="New notes"
    ),
    priority: str | None = typer.Option(None, "--priority", "-p", help="New priority"),
    due: str | None = typer.Option(None, "--due", help="New due date (YYYY-MM-DD)"),
    remove_due: bool = typer.Option(False, "--remove-due", help="Clear the due date"),
    tags: str | None = typer.Option(None, "--tags", help="Replacement comma-separated tags"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Update fields of a task. A progress entry is added to the task file."""
    if due is not None and remove_due:
        raise AppError("--due and --remove-due cannot be combined", ERROR_INVALID_ARGS)

    fields: dict = {}
    if title is not None:
        fields["title"] = title
    if description is not None:
        fields["description"] = description
    if priority is not None:
        fields["priority"] = priority
    if due is not None:
        fields["due_date"] = due
    if remove_due:
        fields["due_date"] = None
    if tags is not None:
        fields["tags"] = parse_tags(tags)

    task_service = get_task_service()
    task = task_service.update_task(resolve_task_id(task_service, task_id), **fields)

    format_success(
        task_service.messages.t("task.updated", title=title or task.title)
    )
    if output != "table":
        format_output(task, output)
