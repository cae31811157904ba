"""Schema inspection commands."""

from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import settings
from ..database import CallableDescriptor, SchemaCatalog
from ..database.connect import Backend, open_connection
from ..errors import DBMetaError

app = typer.Typer(help="Inspect tables, columns and stored routines")
console = Console()

DatabaseArgument = typer.Argument(None, help="Database path or URL (default: DBMETA_DATABASE)")
BackendOption = typer.Option(None, "--backend", "-b", help="Backend: auto, sqlite or duckdb (default: DBMETA_BACKEND)")
CatalogOption = typer.Option(None, "--catalog", "-c", help="Catalog filter (default: DBMETA_CATALOG)")
SchemaOption = typer.Option(None, "--schema", "-s", help="Schema filter (default: DBMETA_SCHEMA_NAME)")


@contextmanager
def open_catalog(
    database: Optional[str],
    backend: Optional[Backend],
    catalog: Optional[str],
    schema: Optional[str],
    name_pattern: Optional[str] = None,
) -> Iterator[SchemaCatalog]:
    """Open the database and yield a SchemaCatalog; the connection is closed on exit.

    Errors are printed and turned into exit code 1.
    """
    database = database or settings.database
    if not database:
        console.print("[red]No database given. Pass a path or set DBMETA_DATABASE.[/red]")
        raise typer.Exit(1)

    try:
        connection = open_connection(
            database,
            backend or Backend(settings.backend),
            read_only=settings.read_only,
        )
    except (DBMetaError, ImportError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    try:
        yield SchemaCatalog(
            connection,
            catalog=catalog or settings.catalog,
            schema=schema or settings.schema_name,
            name_pattern=name_pattern,
        )
    except DBMetaError as e:
        console.print(f"[red]Error reading metadata: {e}[/red]")
        raise typer.Exit(1)
    finally:
        connection.close()


def _text(value) -> str:
    return "" if value is None else str(value)


@app.command("tables")
def list_tables(
    database: Optional[str] = DatabaseArgument,
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Table name pattern (LIKE syntax, e.g. ORDER%)"),
    backend: Optional[Backend] = BackendOption,
    catalog: Optional[str] = CatalogOption,
    schema: Optional[str] = SchemaOption,
):
    """List tables and views."""
    with open_catalog(database, backend, catalog, schema, pattern) as schema_catalog:
        tables = schema_catalog.get_tables()
        if not tables:
            console.print("[yellow]No tables found[/yellow]")
            return

        table = Table(title="Tables")
        table.add_column("Catalog")
        table.add_column("Schema", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Kind")
        table.add_column("Remarks")
        for t in tables:
            table.add_row(_text(t.catalog), _text(t.schema), t.name, _text(t.kind), _text(t.remarks))
        console.print(table)
        console.print(f"\n[bold]Total: {len(tables)} table(s)[/bold]")


@app.command("columns")
def list_columns(
    table_name: str = typer.Argument(..., help="Table name (case-insensitive)"),
    database: Optional[str] = DatabaseArgument,
    backend: Optional[Backend] = BackendOption,
    catalog: Optional[str] = CatalogOption,
    schema: Optional[str] = SchemaOption,
):
    """Show the columns of a table."""
    with open_catalog(database, backend, catalog, schema) as schema_catalog:
        descriptor = schema_catalog.get_table(table_name)
        if descriptor is None:
            console.print(f"[red]Table not found: {table_name}[/red]")
            raise typer.Exit(1)

        table = Table(title=f"{descriptor.name} ({_text(descriptor.kind).lower() or 'table'})")
        table.add_column("#", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Size", justify="right")
        table.add_column("Digits", justify="right")
        table.add_column("Nullable")
        table.add_column("PK")
        table.add_column("Default")
        table.add_column("Comment")
        for column in descriptor.get_fields().values():
            table.add_row(
                _text(column.position),
                column.name,
                f"{column.type_name} ({column.type_label})",
                str(column.size),
                str(column.digits),
                "yes" if column.nullable else "no",
                "[green]yes[/green]" if column.is_primary_key else "",
                _text(column.default_value),
                _text(column.comment),
            )
        console.print(table)


@app.command("keys")
def list_keys(
    table_name: str = typer.Argument(..., help="Table name (case-insensitive)"),
    database: Optional[str] = DatabaseArgument,
    backend: Optional[Backend] = BackendOption,
    catalog: Optional[str] = CatalogOption,
    schema: Optional[str] = SchemaOption,
):
    """Show the primary key columns of a table."""
    with open_catalog(database, backend, catalog, schema) as schema_catalog:
        descriptor = schema_catalog.get_table(table_name)
        if descriptor is None:
            console.print(f"[red]Table not found: {table_name}[/red]")
            raise typer.Exit(1)

        keys = descriptor.get_keys()
        if not keys:
            console.print(f"[yellow]{descriptor.name} has no primary key[/yellow]")
            return
        for key in keys:
            console.print(key)


def _print_callables(title: str, callables) -> None:
    if not callables:
        console.print(f"[yellow]No {title.lower()} found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Catalog")
    table.add_column("Schema", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Kind")
    table.add_column("Comment")
    for c in callables:
        table.add_row(_text(c.catalog), _text(c.schema), c.name, c.kind.value, _text(c.comment))
    console.print(table)


@app.command("functions")
def list_functions(
    database: Optional[str] = DatabaseArgument,
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Function name pattern (LIKE syntax)"),
    backend: Optional[Backend] = BackendOption,
    catalog: Optional[str] = CatalogOption,
    schema: Optional[str] = SchemaOption,
):
    """List stored functions."""
    with open_catalog(database, backend, catalog, schema, pattern) as schema_catalog:
        _print_callables("Functions", schema_catalog.get_functions())


@app.command("procedures")
def list_procedures(
    database: Optional[str] = DatabaseArgument,
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Procedure name pattern (LIKE syntax)"),
    backend: Optional[Backend] = BackendOption,
    catalog: Optional[str] = CatalogOption,
    schema: Optional[str] = SchemaOption,
):
    """List stored procedures."""
    with open_catalog(database, backend, catalog, schema, pattern) as schema_catalog:
        _print_callables("Procedures", schema_catalog.get_procedures())


@app.command("parameters")
def list_parameters(
    name: str = typer.Argument(..., help="Function or procedure name"),
    database: Optional[str] = DatabaseArgument,
    procedure: bool = typer.Option(False, "--procedure", help="Look up a procedure instead of a function"),
    backend: Optional[Backend] = BackendOption,
    catalog: Optional[str] = CatalogOption,
    schema: Optional[str] = SchemaOption,
):
    """Show the parameters of a function or procedure."""
    with open_catalog(database, backend, catalog, schema, name) as schema_catalog:
        callables = schema_catalog.get_procedures() if procedure else schema_catalog.get_functions()
        match: Optional[CallableDescriptor] = next(
            (c for c in callables if c.name.lower() == name.lower()), None
        )
        if match is None:
            kind = "Procedure" if procedure else "Function"
            console.print(f"[red]{kind} not found: {name}[/red]")
            raise typer.Exit(1)

        table = Table(title=f"{match.name} ({match.kind.value})")
        table.add_column("#", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Role")
        table.add_column("Type")
        for parameter in match.get_columns(match.name):
            table.add_row(
                _text(parameter.position),
                _text(parameter.name),
                parameter.role.value,
                f"{parameter.type_name} ({parameter.type_label})",
            )
        console.print(table)
