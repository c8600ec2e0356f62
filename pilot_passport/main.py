#!/usr/bin/env python3
"""
Pilot Passport command line.

Uses Typer for the CLI and Rich for terminal output.

Usage:
    pilot-passport list
    pilot-passport show KMSN
    pilot-passport add KMSN Madison --date 2024-05-01 --rating 4
    pilot-passport edit KMSN "Madison, WI" --date 2024-05-01 --rating 5
    pilot-passport delete KMSN
    pilot-passport init-db
"""

from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .database.config import DatabaseConfig
from .database.store import InMemoryAirportStore, SQLAlchemyAirportStore
from .models.airport import AirportModel
from .services.airport_manager import AirportManager
from .services.errors import AirportError
from .utils.config import get_config
from .utils.logging_config import setup_logging

app = typer.Typer(
    help="Keep a passport of visited airports",
    add_completion=False
)
console = Console()

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]

# Options shared by every command, filled in by the app callback
state = {
    "database_url": None,
    "memory": False,
    "echo": False,
}


@app.callback()
def main(
    database_url: Optional[str] = typer.Option(
        None,
        "--database-url",
        envvar="DATABASE_URL",
        help="SQLAlchemy database URL"
    ),
    memory: bool = typer.Option(
        False,
        "--memory",
        help="Use a throwaway in-memory store instead of the database"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """Pilot Passport: record, rate and revisit the airports you have flown to."""
    config = get_config()
    setup_logging(log_level or config.passport_log_level)

    state["database_url"] = database_url or config.database_url
    state["memory"] = memory
    state["echo"] = config.database_echo


@contextmanager
def open_manager() -> Iterator[AirportManager]:
    """Yield a manager over the store selected by the global options."""
    if state["memory"]:
        yield AirportManager(InMemoryAirportStore())
        return

    db_config = DatabaseConfig(database_url=state["database_url"], echo=state["echo"])
    try:
        yield AirportManager(SQLAlchemyAirportStore(db_config))
    finally:
        db_config.close()


def render_airports(airports: list[AirportModel], title: str = "✈️  Visited Airports") -> Table:
    """Render airports as a Rich table."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("City", style="white")
    table.add_column("Visited", style="yellow")
    table.add_column("Rating", style="green", justify="right")

    for airport in airports:
        table.add_row(
            airport.id,
            airport.city,
            airport.date_visited.strftime("%Y-%m-%d"),
            "★" * airport.rating,
        )
    return table


def fail(error: AirportError) -> None:
    """Print an airport failure and exit with status 1."""
    console.print(f"[red]✗ {error}[/red]")
    raise typer.Exit(code=1)


@app.command("list")
def list_command():
    """List every visited airport."""
    with open_manager() as manager:
        airports = manager.list_airports()
    if not airports:
        console.print("[dim]No airports recorded yet[/dim]")
        return
    console.print(render_airports(airports))
    console.print(f"[dim]{len(airports)} airport(s)[/dim]")


@app.command("show")
def show_command(airport_id: str = typer.Argument(..., help="4-character airport identifier")):
    """Show one airport."""
    with open_manager() as manager:
        airport = manager.find_airport(airport_id)
    if airport is None:
        console.print(f"[yellow]⚠ Airport {airport_id} not found[/yellow]")
        raise typer.Exit(code=1)
    console.print(render_airports([airport], title=f"✈️  {airport.id}"))


@app.command("add")
def add_command(
    airport_id: str = typer.Argument(..., help="4-character airport identifier"),
    city: str = typer.Argument(..., help="City the airport serves"),
    date_visited: Optional[datetime] = typer.Option(
        None, "--date", "-d", formats=DATE_FORMATS, help="Visit date (defaults to now)"
    ),
    rating: int = typer.Option(..., "--rating", "-r", help="Rating from 1 to 5"),
):
    """Record a newly visited airport."""
    with open_manager() as manager:
        try:
            airport = manager.add_airport(
                airport_id, city, date_visited or datetime.now(), rating
            )
        except AirportError as e:
            fail(e)
    console.print(f"[green]✓ Added {airport.id} ({airport.city})[/green]")


@app.command("edit")
def edit_command(
    airport_id: str = typer.Argument(..., help="4-character airport identifier"),
    city: str = typer.Argument(..., help="City the airport serves"),
    date_visited: datetime = typer.Option(
        ..., "--date", "-d", formats=DATE_FORMATS, help="Visit date"
    ),
    rating: int = typer.Option(..., "--rating", "-r", help="Rating from 1 to 5"),
):
    """Replace the city, visit date and rating of a recorded airport."""
    with open_manager() as manager:
        try:
            airport = manager.edit_airport(airport_id, city, date_visited, rating)
        except AirportError as e:
            fail(e)
    if airport is None:
        console.print(f"[yellow]⚠ Airport {airport_id} not found, nothing changed[/yellow]")
        return
    console.print(f"[green]✓ Updated {airport.id}[/green]")


@app.command("delete")
def delete_command(airport_id: str = typer.Argument(..., help="4-character airport identifier")):
    """Remove an airport from the passport."""
    with open_manager() as manager:
        removed = manager.delete_airport(airport_id)
    if removed is None:
        console.print(f"[yellow]⚠ Airport {airport_id} not found, nothing removed[/yellow]")
        return
    console.print(f"[green]✓ Removed {removed.id} ({removed.city})[/green]")


@app.command("init-db")
def init_db_command():
    """Create the airport table if it does not exist."""
    db_config = DatabaseConfig(database_url=state["database_url"], echo=state["echo"])
    db_config.create_tables()
    info = db_config.get_connection_info()
    console.print(f"[green]✓ Database ready[/green] [dim]({info['database_type']}: {info['database_url']})[/dim]")
    db_config.close()


if __name__ == "__main__":
    app()
