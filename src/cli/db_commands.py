"""Database CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.library_api.core.services import DbSessionService
from src.library_api.entities.registry import RESOURCES, ResourceDescriptor
from src.library_api.runtime.init_db import init_db

console = Console()

db_app = typer.Typer(help="Manage the records database")


def _resource(name: str) -> ResourceDescriptor:
    for resource in RESOURCES:
        if resource.name == name:
            return resource
    names = ", ".join(resource.name for resource in RESOURCES)
    console.print(f"[red]❌ Unknown resource '{name}'. Choose one of: {names}[/red]")
    raise typer.Exit(code=1)


@db_app.command("init")
def init() -> None:
    """Create every resource table that does not exist yet."""
    init_db()
    console.print("[green]✅ Database tables created[/green]")


@db_app.command("list")
def list_records(
    resource_name: str = typer.Argument(..., help="Resource to list: authors, books or users"),
) -> None:
    """Print every record of one resource as a table."""
    resource = _resource(resource_name)
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            records = resource.service(session).list()
    finally:
        database_service.dispose()

    if not records:
        console.print(f"[yellow]No {resource.name} found[/yellow]")
        return

    table = Table(title=resource.name.title())
    table.add_column("ID", style="cyan")
    for field_name in resource.entity_type.scalar_fields():
        table.add_column(field_name, style="green")

    for record in records:
        table.add_row(str(record.id), *(str(value) for value in record.scalar_values().values()))

    console.print(table)
