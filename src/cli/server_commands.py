"""Server commands."""

import typer
import uvicorn
from rich.console import Console

from src.library_api.runtime.context import get_config

console = Console()


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """🚀 Run the API server with uvicorn."""
    app_config = get_config().app
    bind_host = host or app_config.host
    bind_port = port or app_config.port

    console.print(f"[blue]Serving Library API on http://{bind_host}:{bind_port}[/blue]")
    uvicorn.run(
        "src.library_api.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )
