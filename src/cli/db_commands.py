"""Database and configuration CLI commands."""

import typer
from dotenv import load_dotenv
from rich.prompt import Confirm
from rich.table import Table
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from .utils import console, get_project_root

db_app = typer.Typer(help="🗄️  Database and configuration commands")


@db_app.command("init")
def init_database(
    drop: bool = typer.Option(
        False, "--drop", help="Drop existing tables before creating them"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Create the users and specials tables."""
    load_dotenv(get_project_root() / ".env")

    from src.specials_api.runtime.init_db import init_db

    if drop and not yes:
        if not Confirm.ask("[red]Drop all existing tables and their data?[/red]"):
            console.print("[yellow]Aborted[/yellow]")
            raise typer.Exit()

    try:
        init_db(drop=drop)
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Database initialization failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Database tables are ready[/green]")


@db_app.command("config")
def show_config() -> None:
    """Show the resolved configuration (passwords masked)."""
    load_dotenv(get_project_root() / ".env")

    from src.specials_api.runtime.context import get_config

    config = get_config()

    table = Table(title="Resolved configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("app.environment", config.app.environment)
    table.add_row("app.title", config.app.title)
    table.add_row("app.version", config.app.version)
    table.add_row("app.host", config.app.host)
    table.add_row("app.port", str(config.app.port))
    table.add_row("app.cors.origins", ", ".join(config.app.cors.origins))
    table.add_row(
        "database.url", make_url(config.database.url).render_as_string(hide_password=True)
    )
    table.add_row("database.create_tables", str(config.database.create_tables))
    table.add_row("logging.level", config.logging.level)
    table.add_row("logging.format", config.logging.format)
    table.add_row("logging.file", config.logging.file or "-")

    console.print(table)
