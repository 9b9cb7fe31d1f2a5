"""Command 'version' of taskmd"""

import platform

import typer

from taskmd_cli import __version__
from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command("version")
def version_command(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also show where config and tasks live"
    ),
) -> None:
    """Show version information"""
    console.print(f"taskmd {__version__}")
    if verbose:
        config_service = get_config_service()
        console.print(f"Python:  {platform.python_version()}")
        console.print(f"Config:  {config_service.config_path}")
        console.print(f"Tasks:   {config_service.resolve_root()}")
        console.print(f"Language: {config_service.language}")
