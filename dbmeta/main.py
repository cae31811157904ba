"""dbmeta - Main entry point."""

import logging

import typer
from rich.console import Console
from .commands import inspect
from .config import settings

app = typer.Typer(
    name="dbmeta",
    help="Inspect tables, columns and stored routines of a database",
    add_completion=False,
)

# Add subcommands
app.add_typer(inspect.app, name="inspect")

console = Console()


@app.command()
def config():
    """Show current configuration."""
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Database: {settings.database or 'Not set'}")
    console.print(f"  Backend: {settings.backend}")
    console.print(f"  Read-only: {'Yes' if settings.read_only else 'No'}")
    console.print(f"  Catalog: {settings.catalog or 'All'}")
    console.print(f"  Schema: {settings.schema_name or 'All'}")
    console.print(f"  Log level: {settings.log_level}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log metadata queries (DEBUG level)"),
):
    """
    dbmeta - Inspect database schema metadata.

    Examples:

        dbmeta inspect tables app.db

        dbmeta inspect columns ORDERS app.db

        dbmeta inspect functions warehouse.duckdb --schema main
    """
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


if __name__ == "__main__":
    app()
