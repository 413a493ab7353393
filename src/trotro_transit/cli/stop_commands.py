"""CLI commands for browsing stops."""

import sys

import click
from rich.console import Console
from rich.table import Table

from ..config import config
from ..core import NetworkDataError, StopNotFoundError, TransitNetwork, ValidationError
from .formatters import format_stop_json, format_stop_table

console = Console()
error_console = Console(stderr=True)


def load_network(network_file: str | None) -> TransitNetwork:
    """Load the network snapshot, exiting with an error message on failure."""
    try:
        return TransitNetwork.from_json(network_file or config.network_file)
    except (NetworkDataError, ValidationError) as e:
        error_console.print(f"[red]Error loading network:[/red] {e}")
        sys.exit(1)


@click.group()
def stops() -> None:
    """Stop browsing commands."""
    pass


@stops.command("list")
@click.option(
    "--network",
    "-n",
    "network_file",
    type=click.Path(dir_okay=False),
    help="Network snapshot JSON file",
)
@click.option("--query", "-q", help="Only stops whose name contains this text")
@click.option("--limit", "-l", default=20, help="Maximum number of results")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def list_stops(
    network_file: str | None, query: str | None, limit: int, output_format: str
) -> None:
    """List stops, optionally filtered by name.

    Examples:
        trotro-transit stops list
        trotro-transit stops list --query mad
        trotro-transit stops list --format json --limit 100
    """
    network = load_network(network_file)

    if query:
        results = network.search_stops(query, limit=limit)
    else:
        results = sorted(network.stops, key=lambda s: s.name.lower())[:limit]

    if not results:
        if query:
            console.print(f"[yellow]No stops found matching '{query}'[/yellow]")
        else:
            console.print("[yellow]No stops found[/yellow]")
        return

    if output_format == "json":
        click.echo(format_stop_json(results))
    else:
        format_stop_table(results)


@stops.command("show")
@click.argument("name")
@click.option(
    "--network",
    "-n",
    "network_file",
    type=click.Path(dir_okay=False),
    help="Network snapshot JSON file",
)
def show_stop(name: str, network_file: str | None) -> None:
    """Show a stop and the routes serving it.

    Examples:
        trotro-transit stops show "Madina"
    """
    network = load_network(network_file)

    try:
        stop = network.get_stop(name)
    except StopNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(f"[bold]{stop.name}[/bold]")
    console.print(f"Coordinates: {stop.coords[0]:.6f}, {stop.coords[1]:.6f}")
    if stop.id is not None:
        console.print(f"ID: {stop.id}")

    routes = network.routes_for_stop(stop.name)
    if not routes:
        console.print("[dim]No routes serve this stop[/dim]")
        return

    table = Table(
        title=f"Routes ({len(routes)})", show_header=True, header_style="bold magenta"
    )
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Fare", style="green", justify="right")
    table.add_column("Via", style="dim")

    for route in routes:
        table.add_row(
            route.from_stop,
            route.to_stop,
            f"{route.fare:g}",
            ", ".join(w.name for w in route.intermediates) or "-",
        )

    console.print(table)
