"""API server CLI command."""

import typer
import uvicorn
from rich.panel import Panel

from src.storefront.runtime.context import get_config

from .db_commands import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the storefront API server.

    Host and port default to the values in config.yaml.
    """
    app_config = get_config().app
    bind_host = host or app_config.host
    bind_port = port or app_config.port

    console.print(
        Panel.fit(
            "[bold green]Starting Storefront API[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Server will be available at:[/blue] http://{bind_host}:{bind_port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.storefront.api.http.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        reload_dirs=["src"] if reload else None,
        log_level=log_level,
    )
