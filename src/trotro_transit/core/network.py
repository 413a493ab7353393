"""In-memory snapshot of a transit network."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pydantic

from .exceptions import (
    NetworkDataError,
    RouteNotFoundError,
    StopNotFoundError,
    ValidationError,
)
from .graph import Graph, build_graph
from .models import (
    Coordinates,
    NetworkDocument,
    PathResult,
    Priority,
    Route,
    RouteSearchRequest,
    Stop,
)
from .search import parse_priority, search_graph

logger = logging.getLogger(__name__)


class TransitNetwork:
    """Stops and routes of a network, with route search on top."""

    def __init__(self, stops: Iterable[Stop], routes: Iterable[Route]):
        """Initialize the network.

        Args:
            stops: Stops with unique names
            routes: Routes between the stops

        Raises:
            ValidationError: If two stops share a name
        """
        self.stops = list(stops)
        self.routes = list(routes)
        self._stops_by_name: dict[str, Stop] = {}
        for stop in self.stops:
            if stop.name in self._stops_by_name:
                raise ValidationError(f"Duplicate stop name: {stop.name}")
            self._stops_by_name[stop.name] = stop
        self._graph: Graph | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TransitNetwork":
        """Create a network from a {"stops": [...], "routes": [...]} document.

        Raises:
            NetworkDataError: If the document or one of its records fails validation
        """
        if not isinstance(data, dict):
            raise NetworkDataError("Network document must be a JSON object")

        try:
            document = NetworkDocument.model_validate(data)
        except pydantic.ValidationError as e:
            raise NetworkDataError(f"Invalid network data: {e}") from e

        return cls(document.stops, document.routes)

    @classmethod
    def from_json(cls, file_path: Path | str) -> "TransitNetwork":
        """Load a network snapshot from a JSON file.

        Raises:
            NetworkDataError: If the file cannot be read or parsed
        """
        file_path = Path(file_path)
        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise NetworkDataError(f"Cannot read network file {file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise NetworkDataError(f"Invalid JSON in {file_path}: {e}") from e

        network = cls.from_dict(data)
        logger.info(
            f"Loaded {len(network.stops)} stops and {len(network.routes)} routes "
            f"from {file_path}"
        )
        return network

    @property
    def graph(self) -> Graph:
        """Search graph, built on first use."""
        if self._graph is None:
            self._graph = build_graph(self.stops, self.routes)
        return self._graph

    def has_stop(self, name: str) -> bool:
        return name in self._stops_by_name

    def get_stop(self, name: str) -> Stop:
        """Get a stop by exact name.

        Raises:
            StopNotFoundError: If no stop has this name
        """
        try:
            return self._stops_by_name[name]
        except KeyError:
            raise StopNotFoundError(f"Stop not found: {name}") from None

    def search_stops(self, query: str, limit: int | None = None) -> list[Stop]:
        """Find stops whose name contains the query, ignoring case.

        Exact matches come first, then prefix matches, then the rest,
        each group sorted by name.
        """
        needle = query.strip().lower()
        matches = [stop for stop in self.stops if needle in stop.name.lower()]

        def rank(stop: Stop) -> tuple[int, str]:
            name = stop.name.lower()
            if name == needle:
                return (0, name)
            if name.startswith(needle):
                return (1, name)
            return (2, name)

        matches.sort(key=rank)
        return matches[:limit] if limit is not None else matches

    def routes_for_stop(self, name: str) -> list[Route]:
        """Get routes starting or ending at a stop."""
        return [r for r in self.routes if name in (r.from_stop, r.to_stop)]

    def search(self, request: RouteSearchRequest) -> PathResult | None:
        """Search the best route for a request."""
        return search_graph(
            self.graph, request.from_stop, request.to_stop, request.priority
        )

    def find_route(
        self, start: str, end: str, priority: Priority | str = Priority.FARE
    ) -> PathResult | None:
        """Find the best route between two stops.

        Returns:
            PathResult, or None if end cannot be reached from start

        Raises:
            ValidationError: If a stop name is empty or priority is unknown
        """
        if not start or not start.strip():
            raise ValidationError("Departure stop name cannot be empty")
        if not end or not end.strip():
            raise ValidationError("Destination stop name cannot be empty")

        request = RouteSearchRequest(
            from_stop=start, to_stop=end, priority=parse_priority(priority)
        )
        return self.search(request)

    def require_route(
        self, start: str, end: str, priority: Priority | str = Priority.FARE
    ) -> PathResult:
        """Like find_route, but raise when no route exists.

        Raises:
            StopNotFoundError: If either stop is not in the network
            RouteNotFoundError: If the stops are not connected
        """
        for name in (start, end):
            if not self.has_stop(name):
                raise StopNotFoundError(f"Stop not found: {name}")

        result = self.find_route(start, end, priority)
        if result is None:
            raise RouteNotFoundError(f"No route from {start} to {end}")
        return result

    def direct_routes(self, start: str, end: str) -> list[Route]:
        """Get routes whose stop sequence begins at start and ends at end."""
        matches = []
        for route in self.routes:
            sequence = route.stop_sequence()
            if sequence[0] == start and sequence[-1] == end:
                matches.append(route)
        return matches

    def route_coordinates(self, route: Route) -> list[Coordinates]:
        """Get the drawing coordinates of a route: origin, waypoints, destination.

        Endpoint coordinates missing on the route are taken from the stop list.

        Raises:
            StopNotFoundError: If an endpoint has no coordinates anywhere
        """
        from_coords = route.from_coords or self.get_stop(route.from_stop).coords
        to_coords = route.to_coords or self.get_stop(route.to_stop).coords
        return [
            from_coords,
            *(waypoint.coords for waypoint in route.intermediates),
            to_coords,
        ]

    def path_coordinates(self, result: PathResult) -> list[Coordinates]:
        """Get the coordinates of each stop on a result path."""
        return [self.get_stop(name).coords for name in result.path]
