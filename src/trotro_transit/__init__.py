"""Trotro Transit Package

A Python package for finding the cheapest, shortest or most direct route
between stops of a small transit network, with a CLI on top.
"""

__version__ = "0.1.0"

from .core.models import PathResult, Priority, Route, Stop
from .core.network import TransitNetwork
from .core.search import find_best_path

__all__ = [
    "PathResult",
    "Priority",
    "Route",
    "Stop",
    "TransitNetwork",
    "find_best_path",
]
