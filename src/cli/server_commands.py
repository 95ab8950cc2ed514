"""Server CLI commands."""

import typer
from dotenv import load_dotenv
from rich.panel import Panel

from .utils import console, get_project_root

server_app = typer.Typer(help="🚀 Run the Specials API server")


@server_app.command(name="start")
def start_server(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Uvicorn log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the HTTP server.

    Variables from a local .env file are loaded before the configuration is
    read, so DATABASE_URL, PORT and friends can live there.
    """
    load_dotenv(get_project_root() / ".env")

    import uvicorn

    from src.specials_api.runtime.context import get_config

    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(
        Panel.fit(
            f"[bold green]Starting {app_config.title} v{app_config.version}[/bold green]",
            border_style="green",
        )
    )
    console.print(f"[blue]Environment:[/blue] {app_config.environment}")
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    try:
        uvicorn.run(
            "src.specials_api.api.http.app:app",
            host=host,
            port=port,
            reload=reload,
            reload_dirs=["src"] if reload else None,
            log_level=log_level,
            access_log=False,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
