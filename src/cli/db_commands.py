"""Database CLI commands."""

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from src.storefront.core.services import DbManageService, DbSessionService
from src.storefront.runtime.context import get_config

console = Console()

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command("init")
def init_database() -> None:
    """Create every storefront table that does not exist yet."""
    database_service = DbSessionService()
    try:
        tables = DbManageService(database_service.engine).create_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()

    table = Table(title="Storefront tables")
    table.add_column("Table", style="cyan")
    for name in tables:
        table.add_row(name)

    console.print(table)
    console.print(f"[green]✅ Database ready ({len(tables)} tables)[/green]")


@db_app.command("check")
def check_database() -> None:
    """Verify that the configured database accepts connections."""
    database_service = DbSessionService()
    try:
        healthy = database_service.health_check()
    finally:
        database_service.dispose()

    url = make_url(get_config().database.url).render_as_string(hide_password=True)
    if not healthy:
        console.print(f"[red]❌ Database at {url} is not reachable[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✅ Database at {url} is reachable[/green]")
