"""Core route search functionality."""

from .exceptions import (
    NetworkDataError,
    RouteNotFoundError,
    StopNotFoundError,
    TransitSearchError,
    ValidationError,
)
from .graph import build_graph
from .models import (
    Cost,
    Edge,
    PathResult,
    Priority,
    Route,
    RouteLeg,
    RouteSearchRequest,
    Stop,
    Waypoint,
)
from .network import TransitNetwork
from .search import compare_costs, find_best_path, parse_priority, search_graph

__all__ = [
    "Cost",
    "Edge",
    "PathResult",
    "Priority",
    "Route",
    "RouteLeg",
    "RouteSearchRequest",
    "Stop",
    "Waypoint",
    "TransitNetwork",
    "build_graph",
    "compare_costs",
    "find_best_path",
    "parse_priority",
    "search_graph",
    "TransitSearchError",
    "StopNotFoundError",
    "RouteNotFoundError",
    "NetworkDataError",
    "ValidationError",
]
