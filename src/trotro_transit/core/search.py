"""Lexicographic best-route search over the stop graph."""

import heapq
import itertools
import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import ValidationError
from .graph import Graph, build_graph
from .models import Cost, PathResult, Priority, Route, RouteLeg, Stop

logger = logging.getLogger(__name__)

UNREACHED = Cost(math.inf, math.inf, math.inf)  # type: ignore[arg-type]


def parse_priority(value: Priority | str | None) -> Priority:
    """Resolve a priority selector.

    Args:
        value: A Priority, one of "fare", "distance" or "stops", or None for the default

    Returns:
        The matching Priority

    Raises:
        ValidationError: If the value names no known priority
    """
    if value is None:
        return Priority.FARE
    if isinstance(value, Priority):
        return value
    try:
        return Priority(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in Priority)
        raise ValidationError(
            f"Unknown priority '{value}' (expected one of: {choices})"
        ) from None


def cost_key(cost: Cost, priority: Priority) -> tuple[float, float, float]:
    """Reorder a cost into the key sequence compared for a priority."""
    if priority is Priority.DISTANCE:
        return (cost.distance, cost.fare, cost.legs)
    if priority is Priority.STOPS:
        return (cost.legs, cost.fare, cost.distance)
    return (cost.fare, cost.legs, cost.distance)


def compare_costs(a: Cost, b: Cost, priority: Priority | str = Priority.FARE) -> int:
    """Compare two costs under a priority.

    Returns:
        Negative if a is better, positive if b is better, 0 if equal
    """
    priority = parse_priority(priority)
    key_a = cost_key(a, priority)
    key_b = cost_key(b, priority)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


@dataclass
class _Label:
    stop: str
    path: tuple[str, ...]
    legs: tuple[RouteLeg, ...]
    cost: Cost


def search_graph(
    graph: Graph,
    start: str,
    end: str,
    priority: Priority | str = Priority.FARE,
) -> PathResult | None:
    """Find the best path through a prebuilt graph.

    Args:
        graph: Adjacency map from build_graph
        start: Departure stop name
        end: Destination stop name
        priority: Cost ordering to minimize

    Returns:
        PathResult for the optimal path, or None if end is unreachable

    Raises:
        ValidationError: If priority is not a known value
    """
    priority = parse_priority(priority)

    if start == end:
        return PathResult(path=(start,))

    best: dict[str, Cost] = {start: Cost(0, 0, 0.0)}
    counter = itertools.count()
    origin = _Label(stop=start, path=(start,), legs=(), cost=best[start])
    frontier = [(cost_key(origin.cost, priority), next(counter), origin)]

    while frontier:
        key, _, current = heapq.heappop(frontier)
        if key > cost_key(best.get(current.stop, UNREACHED), priority):
            continue

        if current.stop == end:
            logger.debug(
                f"Best {priority} path {start} → {end}: {current.cost.legs} legs, "
                f"fare {current.cost.fare:g}"
            )
            return PathResult(
                path=current.path,
                legs=current.legs,
                total_fare=current.cost.fare,
                total_distance=current.cost.distance,
                total_stops=current.cost.legs,
            )

        for edge in graph.get(current.stop, []):
            candidate = current.cost.extend(edge)
            candidate_key = cost_key(candidate, priority)
            if candidate_key < cost_key(best.get(edge.to, UNREACHED), priority):
                best[edge.to] = candidate
                leg = RouteLeg(
                    from_stop=current.stop,
                    to_stop=edge.to,
                    fare=edge.fare,
                    distance=edge.distance,
                )
                label = _Label(
                    stop=edge.to,
                    path=current.path + (edge.to,),
                    legs=current.legs + (leg,),
                    cost=candidate,
                )
                heapq.heappush(frontier, (candidate_key, next(counter), label))

    logger.debug(f"No path {start} → {end}")
    return None


def find_best_path(
    stops: Iterable[Stop],
    routes: Iterable[Route],
    start: str,
    end: str,
    priority: Priority | str = Priority.FARE,
) -> PathResult | None:
    """Find the best path between two named stops.

    Builds the graph from the given records, then searches it.

    Args:
        stops: Stops of the network
        routes: Routes between the stops
        start: Departure stop name
        end: Destination stop name
        priority: "fare" (default), "distance" or "stops"

    Returns:
        PathResult for the optimal path, or None if end is unreachable

    Raises:
        ValidationError: If priority is not a known value
    """
    priority = parse_priority(priority)
    return search_graph(build_graph(stops, routes), start, end, priority)
