"""Main entry point for taskmd."""

import os

import typer

from taskmd_cli.commands import (
    complete_command,
    config_command,
    create_command,
    dashboard_command,
    delete_command,
    list_command,
    search_command,
    serve_command,
    show_command,
    start_command,
    status_command,
    today_command,
    update_command,
    version_command,
)
from taskmd_cli.services.config_service import ENV_LANGUAGE, ENV_ROOT, get_config_service
from taskmd_cli.utils.exit_codes import ERROR_GENERAL
from taskmd_cli.utils.logger import setup_logging
from taskmd_cli.utils.typer_helpers import SuggestingGroup
from taskmd_cli.utils.ui.formatters import format_error

app = typer.Typer(
    name="taskmd",
    cls=SuggestingGroup,
    help="Track tasks as Markdown files: todo/, wip/ and completed/<date>/",
    no_args_is_help=True,
)

# Task commands
app.add_typer(create_command.app)
app.add_typer(list_command.app)
app.add_typer(search_command.app)
app.add_typer(show_command.app)
app.add_typer(start_command.app)
app.add_typer(complete_command.app)
app.add_typer(status_command.app)
app.add_typer(update_command.app)
app.add_typer(delete_command.app)
app.add_typer(today_command.app)
app.add_typer(dashboard_command.app)

# Adapters and housekeeping
app.add_typer(serve_command.app)
app.add_typer(config_command.app, name="config", help="Configuration management")
app.add_typer(version_command.app)


@app.callback()
def main_callback(
    root: str | None = typer.Option(
        None, "--root", "-r", help=f"Task directory (overrides ${ENV_ROOT} and config)"
    ),
    language: str | None = typer.Option(
        None, "--language", "-l", help=f"Message language, en or ja (overrides ${ENV_LANGUAGE})"
    ),
) -> None:
    """Track tasks as Markdown files."""
    if root:
        os.environ[ENV_ROOT] = root
    if language:
        os.environ[ENV_LANGUAGE] = language

    try:
        log_config = get_config_service().config.log
    except RuntimeError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_GENERAL) from e
    setup_logging(log_config.level, log_config.dir)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
