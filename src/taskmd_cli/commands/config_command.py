"""Configuration management commands."""

import typer

from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.utils.ui.console import get_console
from taskmd_cli.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console(highlight=False)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.root)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get_value(key)
    console.print("" if value is None else str(value))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., ui.language)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    new_value = get_config_service().set_value(key, value)
    format_success(f"Configuration '{key}' set to '{new_value}'")


@app.command("list")
@command_wrapper
def list_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """Show every configuration value."""
    config_service = get_config_service()
    format_output(config_service.list_values(), output)
    if output == "table":
        console.print(f"[dim]{config_service.config_path}[/dim]")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Are you sure you want to reset the configuration?"):
        format_info("Cancelled")
        raise typer.Exit(0)

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
