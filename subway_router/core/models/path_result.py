"""
Path Result Model

Data models for the solver output and the final route.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, FrozenSet

from .station import Station


# Adjacency mapping: station id -> neighbour id -> edge weight
Graph = Dict[str, Dict[str, float]]


@dataclass
class SearchResult:
    """Per-node distances and predecessor links produced by a shortest-path search."""

    distances: Dict[str, float]
    predecessors: Dict[str, Optional[str]]

    def distance_to(self, station_id: str) -> float:
        return self.distances.get(station_id, math.inf)


@dataclass(frozen=True)
class PathResult:
    """
    The shortest route between two stations.

    Stations are ordered from start to end inclusive. Lines holds the
    unique names of every line that serves at least one hop of the route.
    """

    stations: List[Station]
    total_distance: float
    lines: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.lines, frozenset):
            object.__setattr__(self, 'lines', frozenset(self.lines))

    @property
    def station_ids(self) -> List[str]:
        return [station.id for station in self.stations]

    @property
    def station_count(self) -> int:
        return len(self.stations)

    @property
    def start_station(self) -> Optional[Station]:
        return self.stations[0] if self.stations else None

    @property
    def end_station(self) -> Optional[Station]:
        return self.stations[-1] if self.stations else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the route to a JSON-friendly dictionary."""
        return {
            "stations": [station.to_dict() for station in self.stations],
            "totalDistance": self.total_distance,
            "lines": sorted(self.lines),
        }

    def __str__(self) -> str:
        names = " -> ".join(station.get_display_name() for station in self.stations)
        return f"{names} ({self.total_distance:.2f})"
