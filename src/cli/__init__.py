"""Main CLI application module."""

import typer

from .db_commands import db_app
from .server_commands import server_app

# Create the main CLI application
app = typer.Typer(
    help="🛠️  Specials API CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(server_app, name="server")
app.add_typer(db_app, name="db")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
