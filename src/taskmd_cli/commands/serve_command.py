"""Command 'serve' of taskmd"""

import typer

from taskmd_cli.api.server import create_app
from taskmd_cli.services.config_service import get_config_service
from taskmd_cli.services.task_service import get_task_service
from taskmd_cli.utils.ui.console import get_console

from .decorators import command_wrapper

app = typer.Typer()
console = get_console()


@app.command("serve")
@command_wrapper
def serve_command(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", help="Port to listen on"),
    debug: bool = typer.Option(False, "--debug", help="Enable the Flask debugger"),
) -> None:
    """Serve the task operations over HTTP."""
    server_config = get_config_service().config.server
    host = host or server_config.host
    port = port or server_config.port

    task_service = get_task_service()
    console.print(
        f"[bold]taskmd[/bold] serving [cyan]{task_service.repository.store.root}[/cyan] "
        f"on [cyan]http://{host}:{port}[/cyan]"
    )
    create_app(task_service).run(host=host, port=port, debug=debug)
