"""CLI main entry point for trotro route search."""

import logging
import sys

import click
from rich.console import Console

from .. import __version__
from ..config import LOG_LEVELS, config
from ..core import Priority, ValidationError
from .formatters import (
    format_direct_routes,
    format_result_detailed,
    format_result_json,
    format_result_table,
)
from .stop_commands import load_network, stops

console = Console()
error_console = Console(stderr=True)

network_option = click.option(
    "--network",
    "-n",
    "network_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Network snapshot JSON file (default: $TROTRO_NETWORK_FILE)",
)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: $TROTRO_LOG_LEVEL)",
)
def cli(log_level: str | None) -> None:
    """Trotro Transit - Find the best route between stops of a transit network."""
    level = (log_level or config.log_level).upper()
    if level not in LOG_LEVELS:
        error_console.print(
            f"[yellow]Warning:[/yellow] Unknown log level {level}, using WARNING"
        )
        level = "WARNING"

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.argument("from_stop")
@click.argument("to_stop")
@network_option
@click.option(
    "--priority",
    "-p",
    type=click.Choice([p.value for p in Priority]),
    default=None,
    help="What to minimize first (default: $TROTRO_PRIORITY or fare)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json", "detailed"]),
    default="table",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed information")
def search(
    from_stop: str,
    to_stop: str,
    network_file: str | None,
    priority: str | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Search for the best route between two stops.

    Examples:
        trotro-transit search "Circle" "Madina"
        trotro-transit search "Circle" "Madina" --priority stops
        trotro-transit search "Kaneshie" "Tema" --format json
    """
    network = load_network(network_file)

    try:
        for name in (from_stop, to_stop):
            if not network.has_stop(name):
                error_console.print(f"[red]Unknown stop:[/red] {name}")
                suggestions = network.search_stops(name, limit=5)
                if suggestions:
                    error_console.print(
                        "Did you mean: " + ", ".join(s.name for s in suggestions)
                    )
                sys.exit(1)

        result = network.find_route(
            from_stop, to_stop, priority or config.priority
        )
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if result is None:
        error_console.print(
            f"[yellow]No route found:[/yellow] {from_stop} is not connected to {to_stop}"
        )
        sys.exit(1)

    if output_format == "json":
        click.echo(format_result_json(result))
    elif output_format == "detailed":
        format_result_detailed(result)
    else:
        format_result_table(result, verbose=verbose)


@cli.command()
@click.argument("from_stop")
@click.argument("to_stop")
@network_option
def direct(from_stop: str, to_stop: str, network_file: str | None) -> None:
    """List routes running directly from one stop to another.

    Examples:
        trotro-transit direct "Circle" "Madina"
    """
    network = load_network(network_file)
    routes = network.direct_routes(from_stop, to_stop)

    if not routes:
        console.print(f"[yellow]No direct routes from {from_stop} to {to_stop}[/yellow]")
        return

    format_direct_routes(routes)


cli.add_command(stops)


@cli.group("config")
def config_group() -> None:
    """Configuration management."""
    pass


@config_group.command("show")
def show_config() -> None:
    """Show current configuration."""
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"• Network file: {config.network_file}")
    console.print(f"• Default priority: {config.priority}")
    console.print(f"• Log level: {config.log_level}")

    try:
        config.validate()
    except ValidationError as e:
        error_console.print(f"[yellow]Warning:[/yellow] {e}")


if __name__ == "__main__":
    cli()
