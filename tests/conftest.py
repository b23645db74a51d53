"""
Global pytest configuration and fixtures.
"""

import json
import random
import pytest

from subway_router.core.models import Station, Position, SubwayLine, SubwayNetwork


def make_station(station_id, x, y, z, name=None):
    """Build a station with a position."""
    return Station(id=station_id, name=name or station_id, position=Position(x, y, z))


@pytest.fixture
def abc_network():
    """A(0,0,0), B(3,4,0), C(3,4,3) on a single line L1 = [A, B, C]."""
    return SubwayNetwork(
        stations=[
            make_station("A", 0, 0, 0),
            make_station("B", 3, 4, 0),
            make_station("C", 3, 4, 3),
        ],
        lines=[SubwayLine(id="l1", name="L1", color="#ff0000", stations=["A", "B", "C"])],
    )


@pytest.fixture
def two_line_network():
    """Same stations as abc_network, split across L1 = [A, B] and L2 = [B, C]."""
    return SubwayNetwork(
        stations=[
            make_station("A", 0, 0, 0),
            make_station("B", 3, 4, 0),
            make_station("C", 3, 4, 3),
        ],
        lines=[
            SubwayLine(id="l1", name="L1", color="#ff0000", stations=["A", "B"]),
            SubwayLine(id="l2", name="L2", color="#00ff00", stations=["B", "C"]),
        ],
    )


@pytest.fixture
def disconnected_network():
    """Two lines sharing no station plus one station served by no line."""
    return SubwayNetwork(
        stations=[
            make_station("A", 0, 0, 0),
            make_station("B", 1, 0, 0),
            make_station("X", 10, 0, 0),
            make_station("Y", 11, 0, 0),
            make_station("LONE", 5, 5, 5),
        ],
        lines=[
            SubwayLine(id="west", name="West", stations=["A", "B"]),
            SubwayLine(id="east", name="East", stations=["X", "Y"]),
        ],
    )


@pytest.fixture
def shortcut_network():
    """
    A long line A-B-C-D and an express line A-D.

    The express hop (sqrt(27), about 5.2) beats the stopping route
    (3 + 3 + 3 = 9), so A to D should take the express.
    """
    return SubwayNetwork(
        stations=[
            make_station("A", 0, 0, 0),
            make_station("B", 0, 3, 0),
            make_station("C", 3, 3, 0),
            make_station("D", 3, 3, 3),
            make_station("E", 6, 3, 3),
        ],
        lines=[
            SubwayLine(id="stopping", name="Stopping", stations=["A", "B", "C", "D", "E"]),
            SubwayLine(id="express", name="Express", stations=["A", "D"]),
        ],
    )


def make_random_network(seed, station_count=8, line_count=4, max_line_length=5):
    """Build a small random network with deterministic positions and lines."""
    rng = random.Random(seed)
    stations = [
        make_station(f"S{i}", rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
        for i in range(station_count)
    ]
    ids = [station.id for station in stations]
    lines = []
    for i in range(line_count):
        length = rng.randint(2, max_line_length)
        lines.append(SubwayLine(id=f"line{i}", name=f"Line {i}", stations=rng.sample(ids, length)))
    return SubwayNetwork(stations=stations, lines=lines)


@pytest.fixture
def random_network():
    """Factory for seeded random networks."""
    return make_random_network


@pytest.fixture
def sample_subway_data():
    """Decoded subway data in the JSON document shape."""
    return {
        "stations": [
            {"id": "A", "name": "Alpha", "position": {"x": 0, "y": 0, "z": 0}},
            {"id": "B", "name": "Bravo", "position": {"x": 3, "y": 4, "z": 0}},
            {"id": "C", "name": "Charlie", "position": {"x": 3, "y": 4, "z": 3}},
        ],
        "lines": [
            {"id": "l1", "name": "L1", "color": "#ff0000", "stations": ["A", "B"]},
            {"id": "l2", "name": "L2", "color": "#00ff00", "stations": ["B", "C"]},
        ],
    }


@pytest.fixture
def subway_data_file(tmp_path, sample_subway_data):
    """Write the sample data to a temporary JSON file."""
    path = tmp_path / "subway-data.json"
    path.write_text(json.dumps(sample_subway_data), encoding="utf-8")
    return path
