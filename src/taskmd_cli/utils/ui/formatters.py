"""Output formatters for different formats."""

import json
from collections import defaultdict
from typing import Any

import yaml
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskmd_cli.models import DashboardData, TaskDetail, TaskInfo
from taskmd_cli.utils.messages import Messages, get_messages
from taskmd_cli.utils.ui.console import get_console

console = get_console()

OUTPUT_FORMATS = ("table", "json", "yaml")

PRIORITY_COLORS = {
    "high": "bold red",
    "medium": "yellow",
    "low": "green",
}

STATUS_COLORS = {
    "todo": "white",
    "wip": "cyan",
    "completed": "dim green",
}


def to_data(value: Any) -> Any:
    """Convert models (or lists of models) into JSON-compatible data."""
    if isinstance(value, list):
        return [to_data(item) for item in value]
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return value


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    data = to_data(data)
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))
    elif isinstance(data, list):
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None or value == "":
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for item in items:
        table.add_row(*(_display(item.get(col)) for col in columns))
    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _display(value))
    console.print(table)


# ============================================================================
# Task views
# ============================================================================


def _priority_text(priority: str, messages: Messages) -> Text:
    return Text(messages.priority_label(priority), style=PRIORITY_COLORS.get(priority, ""))


def _status_text(status: str, messages: Messages) -> Text:
    return Text(messages.status_label(status), style=STATUS_COLORS.get(status, ""))


def format_tasks_table(
    tasks: list[TaskInfo], messages: Messages | None = None, title: str | None = None
) -> None:
    """Render tasks as one table row each."""
    messages = messages or get_messages()
    if not tasks:
        console.print(f"[yellow]{messages.t('task.none')}[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Status")
    table.add_column("Priority")
    table.add_column("Project", style="blue")
    table.add_column("Due")
    table.add_column("Tags", style="magenta")

    for task in tasks:
        table.add_row(
            task.id,
            task.title,
            _status_text(task.status, messages),
            _priority_text(task.priority, messages),
            task.project,
            task.due_date or messages.t("label.unset"),
            ", ".join(task.tags),
        )

    console.print(table)
    console.print(f"[dim]{messages.t('task.total', count=len(tasks))}[/dim]")


def format_tasks_by_project(tasks: list[TaskInfo], messages: Messages | None = None) -> None:
    """Render tasks grouped under their project names."""
    messages = messages or get_messages()
    if not tasks:
        console.print(f"[yellow]{messages.t('task.none')}[/yellow]")
        return

    groups: dict[str, list[TaskInfo]] = defaultdict(list)
    for task in tasks:
        groups[task.project].append(task)

    for project in sorted(groups):
        project_tasks = groups[project]
        console.print(f"[bold cyan]{project}[/bold cyan] [dim]({len(project_tasks)})[/dim]")
        for task in project_tasks:
            line = Text("  • ")
            line.append(task.title, style="bold")
            line.append("  ")
            line.append_text(_priority_text(task.priority, messages))
            line.append("  ")
            line.append_text(_status_text(task.status, messages))
            if task.due_date:
                line.append(f"  📅 {task.due_date}", style="dim")
            line.append(f"  {task.id}", style="dim")
            console.print(line)
        console.print()

    console.print(f"[dim]{messages.t('task.total', count=len(tasks))}[/dim]")


def format_task_detail(task: TaskDetail, messages: Messages | None = None) -> None:
    """Render a single task with its notes."""
    messages = messages or get_messages()

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("ID", task.id)
    table.add_row("Status", _status_text(task.status, messages))
    table.add_row("Priority", _priority_text(task.priority, messages))
    table.add_row("Project", task.project)
    table.add_row("Due", task.due_date or messages.t("label.unset"))
    table.add_row("Created", task.created_at or "-")
    if task.completed_date:
        table.add_row("Completed", task.completed_date)
    table.add_row("Tags", ", ".join(task.tags) or "-")
    table.add_row("File", str(task.path))

    console.print(Panel(table, title=f"[bold]{task.title}[/bold]", expand=False))
    if task.description:
        console.print(Panel(task.description, title=messages.t("label.notes")))


def format_dashboard(data: DashboardData, messages: Messages | None = None) -> None:
    """Render dashboard figures."""
    messages = messages or get_messages()

    counts = Table(title="Tasks", show_header=True, header_style="bold magenta")
    counts.add_column("Status")
    counts.add_column("Count", justify="right")
    for status, count in data.task_counts.items():
        label = messages.status_label(status) if status != "total" else "total"
        counts.add_row(label, str(count))
    console.print(counts)

    priorities = Table(title="Priority", show_header=True, header_style="bold magenta")
    priorities.add_column("Priority")
    priorities.add_column("Count", justify="right")
    for priority, count in data.priority_counts.items():
        priorities.add_row(_priority_text(priority, messages), str(count))
    console.print(priorities)

    if data.project_counts:
        projects = Table(title="Projects", show_header=True, header_style="bold magenta")
        projects.add_column("Project", style="blue")
        projects.add_column("Count", justify="right")
        for project, count in sorted(data.project_counts.items()):
            projects.add_row(project, str(count))
        console.print(projects)

    console.print(f"[bold red]Overdue:[/bold red] {data.overdue_count}")
    console.print(f"[bold yellow]Due today:[/bold yellow] {data.due_today_count}")

    if data.recently_completed:
        console.print("[bold green]Recently completed:[/bold green]")
        for entry in data.recently_completed:
            console.print(f"  {entry.completed_date}  {entry.title}")


# ============================================================================
# Status lines
# ============================================================================


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
