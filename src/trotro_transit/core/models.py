"""Data models for trotro route search."""

from enum import Enum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

Coordinates = tuple[float, float]


class Priority(str, Enum):
    """Ordering of the cost keys that defines the best route."""

    FARE = "fare"
    DISTANCE = "distance"
    STOPS = "stops"

    def __str__(self) -> str:
        return self.value


class Waypoint(BaseModel):
    """A via-point drawn along a route. Not part of the search graph."""

    name: str = Field(..., description="Stop name")
    coords: Coordinates = Field(..., description="(latitude, longitude) in degrees")


class Stop(BaseModel):
    """Represents a named stop in the network."""

    name: str = Field(..., min_length=1, description="Unique stop name")
    coords: Coordinates = Field(..., description="(latitude, longitude) in degrees")
    id: str | int | None = Field(None, description="Backend identifier, unused by search")

    def __str__(self) -> str:
        return self.name


class Route(BaseModel):
    """Represents a connection between two stops.

    The record is directional for display, but the search uses it both ways.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_stop: str = Field(..., alias="from", description="Origin stop name")
    to_stop: str = Field(..., alias="to", description="Destination stop name")
    fare: float = Field(..., ge=0, description="Fare for the whole route")
    distance: float | None = Field(
        None, ge=0, description="Distance in km, derived from coordinates when absent"
    )
    from_coords: Coordinates | None = Field(None, alias="fromCoords")
    to_coords: Coordinates | None = Field(None, alias="toCoords")
    intermediates: list[Waypoint] = Field(
        default_factory=list, description="Ordered display waypoints"
    )
    id: str | int | None = Field(None, description="Backend identifier")

    def __str__(self) -> str:
        return f"{self.from_stop} → {self.to_stop} ({self.fare:g})"

    def stop_sequence(self) -> list[str]:
        """Get origin, waypoint and destination names in travel order."""
        return [
            self.from_stop,
            *(waypoint.name for waypoint in self.intermediates),
            self.to_stop,
        ]


class Edge(BaseModel):
    """A directed edge of the search graph."""

    model_config = ConfigDict(frozen=True)

    to: str
    fare: float
    distance: float


class Cost(NamedTuple):
    """Accumulated label of a partial path."""

    fare: float
    legs: int
    distance: float

    def extend(self, edge: Edge) -> "Cost":
        return Cost(self.fare + edge.fare, self.legs + 1, self.distance + edge.distance)


class RouteLeg(BaseModel):
    """One traversed edge of a result path."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_stop: str = Field(..., alias="from")
    to_stop: str = Field(..., alias="to")
    fare: float
    distance: float

    def __str__(self) -> str:
        return f"{self.from_stop} → {self.to_stop}"


class PathResult(BaseModel):
    """Best route found between two stops."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(..., description="Stop names from start to end")
    legs: tuple[RouteLeg, ...] = Field(default_factory=tuple)
    total_fare: float = 0
    total_distance: float = 0
    total_stops: int = Field(0, description="Number of legs travelled")

    def __str__(self) -> str:
        return " → ".join(self.path)

    def summary(self) -> str:
        """Get result summary."""
        return (
            f"{self.path[0]} → {self.path[-1]}\n"
            f"Fare: {self.total_fare:g}\n"
            f"Distance: {self.total_distance:.2f} km\n"
            f"Legs: {self.total_stops}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase document consumed by map and UI clients."""
        return {
            "path": list(self.path),
            "legs": [leg.model_dump(by_alias=True) for leg in self.legs],
            "totalFare": self.total_fare,
            "totalDistance": self.total_distance,
            "totalStops": self.total_stops,
        }


class RouteSearchRequest(BaseModel):
    """Request model for route search."""

    from_stop: str = Field(..., min_length=1, description="Departure stop name")
    to_stop: str = Field(..., min_length=1, description="Destination stop name")
    priority: Priority = Field(Priority.FARE, description="fare, distance or stops")


class NetworkDocument(BaseModel):
    """A stored snapshot of a network: {"stops": [...], "routes": [...]}."""

    stops: list[Stop] = Field(default_factory=list)
    routes: list[Route] = Field(default_factory=list)
