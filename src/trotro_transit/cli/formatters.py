"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import PathResult, Route, Stop

console = Console()


def _format_distance(distance: float | None) -> str:
    if distance is None:
        return "-"
    return f"{distance:.2f} km"


def format_result_table(result: PathResult, verbose: bool = False) -> None:
    """Display a search result as a rich table."""
    table = Table(
        title=f"Route: {result.path[0]} → {result.path[-1]}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Path", " → ".join(result.path))
    table.add_row("Total fare", f"{result.total_fare:g}")
    table.add_row("Total distance", _format_distance(result.total_distance))
    table.add_row("Legs", str(result.total_stops))

    console.print(table)

    if verbose or len(result.legs) > 1:
        console.print()

        if result.legs:
            leg_table = Table(
                title="Leg Details", show_header=True, header_style="bold blue"
            )
            leg_table.add_column("#", style="dim", justify="right")
            leg_table.add_column("From", style="cyan")
            leg_table.add_column("To", style="cyan")
            leg_table.add_column("Fare", style="green", justify="right")
            leg_table.add_column("Distance", style="magenta", justify="right")

            for idx, leg in enumerate(result.legs, 1):
                leg_table.add_row(
                    str(idx),
                    leg.from_stop,
                    leg.to_stop,
                    f"{leg.fare:g}",
                    _format_distance(leg.distance),
                )

            console.print(leg_table)
        else:
            console.print("[dim]Already at destination[/dim]")


def format_result_detailed(result: PathResult) -> None:
    """Display a search result with one panel per leg."""
    summary_text = f"""[bold]From:[/bold] {result.path[0]}
[bold]To:[/bold] {result.path[-1]}
[bold]Fare:[/bold] {result.total_fare:g}
[bold]Distance:[/bold] {_format_distance(result.total_distance)}
[bold]Legs:[/bold] {result.total_stops}"""

    console.print(Panel(summary_text, title="Route Summary", border_style="blue"))

    if result.legs:
        console.print()
        console.print("[bold]Leg Details:[/bold]")

        for i, leg in enumerate(result.legs, 1):
            leg_text = f"""[cyan]{leg.from_stop}[/cyan] → [cyan]{leg.to_stop}[/cyan]
[bold]Fare:[/bold] {leg.fare:g}
[bold]Distance:[/bold] {_format_distance(leg.distance)}"""

            console.print(Panel(leg_text, title=f"Leg {i}", border_style="green"))


def format_result_json(result: PathResult) -> str:
    """Format a search result as JSON."""
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def format_direct_routes(routes: list[Route]) -> None:
    """Display direct routes with their stop sequences."""
    table = Table(
        title=f"Direct Routes ({len(routes)})",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("ID", style="dim")
    table.add_column("Stops", style="cyan")
    table.add_column("Fare", style="green", justify="right")
    table.add_column("Distance", style="magenta", justify="right")

    for route in routes:
        table.add_row(
            str(route.id) if route.id is not None else "-",
            " → ".join(route.stop_sequence()),
            f"{route.fare:g}",
            _format_distance(route.distance),
        )

    console.print(table)


def format_stop_table(stops: list[Stop]) -> None:
    """Display stops as a table."""
    table = Table(
        title=f"Stops ({len(stops)})", show_header=True, header_style="bold magenta"
    )
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Latitude", style="green", justify="right")
    table.add_column("Longitude", style="green", justify="right")

    for stop in stops:
        table.add_row(stop.name, f"{stop.coords[0]:.6f}", f"{stop.coords[1]:.6f}")

    console.print(table)


def format_stop_json(stops: list[Stop]) -> str:
    """Format stops as JSON."""
    stop_data = [
        {"id": s.id, "name": s.name, "coords": list(s.coords)} for s in stops
    ]
    return json.dumps(stop_data, ensure_ascii=False, indent=2)
