"""Test configuration and fixtures."""

import json

import pytest

from trotro_transit.core.models import Route, Stop


@pytest.fixture
def line_stops():
    """Three stops one degree of longitude apart on the equator."""
    return [
        Stop(name="A", coords=(0.0, 0.0)),
        Stop(name="B", coords=(0.0, 1.0)),
        Stop(name="C", coords=(0.0, 2.0)),
    ]


@pytest.fixture
def line_routes():
    """Cheap two-leg path A-B-C next to an expensive direct A-C."""
    return [
        Route(from_stop="A", to_stop="B", fare=1),
        Route(from_stop="B", to_stop="C", fare=1),
        Route(from_stop="A", to_stop="C", fare=5),
    ]


@pytest.fixture
def sample_network_data():
    """Sample network snapshot in the document format."""
    return {
        "stops": [
            {"id": 1, "name": "Circle", "coords": [5.5697, -0.2166]},
            {"id": 2, "name": "Madina", "coords": [5.6698, -0.1656]},
            {"id": 3, "name": "Legon", "coords": [5.6508, -0.1870]},
            {"id": 4, "name": "Kaneshie", "coords": [5.5663, -0.2360]},
            {"id": 5, "name": "Tema", "coords": [5.6698, -0.0166]},
        ],
        "routes": [
            {
                "id": 10,
                "from": "Circle",
                "to": "Legon",
                "fare": 6,
                "distance": 11.2,
                "fromCoords": [5.5697, -0.2166],
                "toCoords": [5.6508, -0.1870],
            },
            {
                "id": 11,
                "from": "Legon",
                "to": "Madina",
                "fare": 3,
                "distance": 3.1,
                "fromCoords": [5.6508, -0.1870],
                "toCoords": [5.6698, -0.1656],
            },
            {
                "id": 12,
                "from": "Circle",
                "to": "Madina",
                "fare": 12,
                "distance": 13.5,
                "fromCoords": [5.5697, -0.2166],
                "toCoords": [5.6698, -0.1656],
                "intermediates": [
                    {"name": "Legon", "coords": [5.6508, -0.1870]},
                ],
            },
            {
                "id": 13,
                "from": "Kaneshie",
                "to": "Circle",
                "fare": 4,
                "fromCoords": [5.5663, -0.2360],
                "toCoords": [5.5697, -0.2166],
            },
        ],
    }


@pytest.fixture
def network_file(tmp_path, sample_network_data):
    """Sample network snapshot written to a JSON file."""
    path = tmp_path / "network.json"
    path.write_text(json.dumps(sample_network_data), encoding="utf-8")
    return path
