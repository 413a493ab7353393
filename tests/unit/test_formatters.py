"""Unit tests for CLI formatters."""

import json
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from trotro_transit.cli.formatters import (
    format_direct_routes,
    format_result_detailed,
    format_result_json,
    format_result_table,
    format_stop_json,
    format_stop_table,
)
from trotro_transit.core.models import PathResult, Route, RouteLeg, Stop


class TestFormatters:
    """Test CLI formatters."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sample_result = PathResult(
            path=("Circle", "Legon", "Madina"),
            legs=(
                RouteLeg(from_stop="Circle", to_stop="Legon", fare=6, distance=11.2),
                RouteLeg(from_stop="Legon", to_stop="Madina", fare=3, distance=3.1),
            ),
            total_fare=9,
            total_distance=14.3,
            total_stops=2,
        )
        self.direct_result = PathResult(
            path=("Circle", "Legon"),
            legs=(
                RouteLeg(from_stop="Circle", to_stop="Legon", fare=6, distance=11.2),
            ),
            total_fare=6,
            total_distance=11.2,
            total_stops=1,
        )

    def _capture(self, func, *args, **kwargs) -> str:
        console = Console(file=StringIO(), width=120)
        with patch("trotro_transit.cli.formatters.console", console):
            func(*args, **kwargs)
            return console.file.getvalue()

    def test_format_result_table_basic(self):
        """Test basic table formatting."""
        output = self._capture(format_result_table, self.sample_result)

        assert "Circle → Madina" in output
        assert "Circle → Legon → Madina" in output
        assert "14.30 km" in output
        assert "Leg Details" in output

    def test_format_result_table_single_leg(self):
        """Test single-leg results skip leg details unless verbose."""
        output = self._capture(format_result_table, self.direct_result)
        assert "Leg Details" not in output

        output = self._capture(format_result_table, self.direct_result, verbose=True)
        assert "Leg Details" in output
        assert "11.20 km" in output

    def test_format_result_table_same_stop(self):
        """Test verbose formatting of a zero-leg result."""
        output = self._capture(
            format_result_table, PathResult(path=("Legon",)), verbose=True
        )
        assert "Already at destination" in output

    def test_format_result_detailed(self):
        """Test detailed formatting."""
        output = self._capture(format_result_detailed, self.sample_result)

        assert "Route Summary" in output
        assert "Leg 1" in output
        assert "Leg 2" in output
        assert "Legon" in output

    def test_format_result_json(self):
        """Test JSON formatting."""
        data = json.loads(format_result_json(self.sample_result))

        assert data["path"] == ["Circle", "Legon", "Madina"]
        assert data["totalFare"] == 9
        assert data["totalDistance"] == 14.3
        assert data["totalStops"] == 2
        assert data["legs"][1] == {
            "from": "Legon",
            "to": "Madina",
            "fare": 3,
            "distance": 3.1,
        }

    def test_format_direct_routes(self):
        """Test direct route table."""
        route = Route(
            from_stop="Circle",
            to_stop="Madina",
            fare=12,
            id=12,
            intermediates=[{"name": "Legon", "coords": (5.6508, -0.187)}],
        )

        output = self._capture(format_direct_routes, [route])

        assert "Direct Routes (1)" in output
        assert "Circle → Legon → Madina" in output
        assert "12" in output

    def test_format_stop_table(self):
        """Test stop table."""
        output = self._capture(
            format_stop_table, [Stop(name="Madina", coords=(5.6698, -0.1656))]
        )

        assert "Stops (1)" in output
        assert "Madina" in output
        assert "5.669800" in output

    def test_format_stop_json(self):
        """Test stop JSON."""
        data = json.loads(format_stop_json([Stop(name="Tema", coords=(5.6, 0.0), id=5)]))
        assert data == [{"id": 5, "name": "Tema", "coords": [5.6, 0.0]}]
