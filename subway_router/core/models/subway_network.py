"""
Subway Network Model

The input aggregate handed to the routing engine: every station and every line.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .station import Station
from .subway_line import SubwayLine


@dataclass(frozen=True)
class SubwayNetwork:
    """
    Immutable collection of stations and lines.

    A station index is built once at construction so lookups by id are
    constant time. When ids repeat, the first station wins.
    """

    stations: List[Station]
    lines: List[SubwayLine]
    _station_index: Dict[str, Station] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        if not isinstance(self.stations, list):
            object.__setattr__(self, 'stations', list(self.stations))
        if not isinstance(self.lines, list):
            object.__setattr__(self, 'lines', list(self.lines))

        index: Dict[str, Station] = {}
        for station in self.stations:
            index.setdefault(station.id, station)
        object.__setattr__(self, '_station_index', index)

    @property
    def station_ids(self) -> List[str]:
        """Unique station ids in input order."""
        return list(self._station_index)

    @property
    def station_count(self) -> int:
        return len(self._station_index)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_station(self, station_id: str) -> Optional[Station]:
        """Get a station by id, or None if unknown."""
        return self._station_index.get(station_id)

    def has_station(self, station_id: str) -> bool:
        return station_id in self._station_index

    def get_line(self, line_id: str) -> Optional[SubwayLine]:
        """Get a line by id, or None if unknown."""
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stations": [station.to_dict() for station in self.stations],
            "lines": [line.to_dict() for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SubwayNetwork':
        return cls(
            stations=[Station.from_dict(s) for s in data.get("stations", [])],
            lines=[SubwayLine.from_dict(l) for l in data.get("lines", [])],
        )
