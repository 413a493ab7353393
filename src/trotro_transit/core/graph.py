"""Search graph construction from stop and route records."""

import logging
from collections.abc import Iterable

from ..utils.geo import haversine_distance
from .models import Coordinates, Edge, Route, Stop

logger = logging.getLogger(__name__)

Graph = dict[str, list[Edge]]


def edge_distance(route: Route, from_coords: Coordinates, to_coords: Coordinates) -> float:
    """Get the declared route distance, or the great-circle distance when absent."""
    if route.distance is not None:
        return route.distance
    return haversine_distance(from_coords[0], from_coords[1], to_coords[0], to_coords[1])


def build_graph(stops: Iterable[Stop], routes: Iterable[Route]) -> Graph:
    """Build an adjacency map keyed by stop name.

    Every route whose endpoints are both known stops yields a forward and a
    reverse edge with the same fare and distance. Routes naming an unknown
    stop are skipped. Parallel edges are kept as-is.

    Args:
        stops: Stops of the network, looked up by name
        routes: Routes connecting the stops

    Returns:
        Mapping of stop name to its outgoing edges
    """
    coords_by_name = {stop.name: stop.coords for stop in stops}

    graph: Graph = {}
    skipped = 0
    for route in routes:
        from_coords = coords_by_name.get(route.from_stop)
        to_coords = coords_by_name.get(route.to_stop)
        if from_coords is None or to_coords is None:
            logger.debug(f"Skipping route {route}: unknown stop")
            skipped += 1
            continue

        distance = edge_distance(route, from_coords, to_coords)
        graph.setdefault(route.from_stop, []).append(
            Edge(to=route.to_stop, fare=route.fare, distance=distance)
        )
        graph.setdefault(route.to_stop, []).append(
            Edge(to=route.from_stop, fare=route.fare, distance=distance)
        )

    logger.debug(
        f"Graph built: {len(graph)} stops, "
        f"{sum(len(edges) for edges in graph.values())} edges, {skipped} routes skipped"
    )
    return graph
