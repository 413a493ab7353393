"""Unit tests for search graph construction."""

import pytest

from trotro_transit.core.graph import build_graph
from trotro_transit.core.models import Edge, Route, Stop


class TestBuildGraph:
    """Test graph builder."""

    def test_each_route_yields_two_edges(self, line_stops):
        graph = build_graph(
            line_stops, [Route(from_stop="A", to_stop="B", fare=2, distance=5)]
        )

        assert graph == {
            "A": [Edge(to="B", fare=2, distance=5)],
            "B": [Edge(to="A", fare=2, distance=5)],
        }

    def test_declared_distance_is_kept(self, line_stops):
        graph = build_graph(
            line_stops, [Route(from_stop="A", to_stop="C", fare=1, distance=0.5)]
        )
        assert graph["A"][0].distance == 0.5

    def test_missing_distance_is_derived(self, line_stops):
        graph = build_graph(line_stops, [Route(from_stop="A", to_stop="B", fare=1)])

        assert graph["A"][0].distance == pytest.approx(111.195, abs=0.001)
        assert graph["B"][0].distance == graph["A"][0].distance

    def test_zero_distance_is_not_replaced(self, line_stops):
        graph = build_graph(
            line_stops, [Route(from_stop="A", to_stop="B", fare=1, distance=0)]
        )
        assert graph["A"][0].distance == 0

    def test_route_with_unknown_stop_is_skipped(self, line_stops):
        routes = [
            Route(from_stop="A", to_stop="Nowhere", fare=1),
            Route(from_stop="Nowhere", to_stop="B", fare=1),
            Route(from_stop="B", to_stop="C", fare=1),
        ]

        graph = build_graph(line_stops, routes)

        assert set(graph) == {"B", "C"}
        assert "Nowhere" not in graph

    def test_parallel_edges_are_kept(self, line_stops):
        routes = [
            Route(from_stop="A", to_stop="B", fare=1, distance=1),
            Route(from_stop="B", to_stop="A", fare=3, distance=1),
        ]

        graph = build_graph(line_stops, routes)

        assert [e.fare for e in graph["A"]] == [1, 3]
        assert [e.fare for e in graph["B"]] == [1, 3]

    def test_self_loop(self, line_stops):
        graph = build_graph(
            line_stops, [Route(from_stop="A", to_stop="A", fare=1, distance=0)]
        )
        assert graph["A"] == [
            Edge(to="A", fare=1, distance=0),
            Edge(to="A", fare=1, distance=0),
        ]

    def test_coordinates_come_from_stop_list(self):
        stops = [Stop(name="X", coords=(0.0, 0.0)), Stop(name="Y", coords=(0.0, 1.0))]
        route = Route(
            from_stop="X", to_stop="Y", fare=1, fromCoords=(10, 10), toCoords=(10, 10)
        )

        graph = build_graph(stops, [route])

        assert graph["X"][0].distance == pytest.approx(111.195, abs=0.001)

    def test_empty_inputs(self):
        assert build_graph([], []) == {}
