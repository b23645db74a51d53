"""
Subway Line Model

Data model for a subway line as an ordered sequence of station ids.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Tuple


@dataclass(frozen=True)
class SubwayLine:
    """
    Represents a subway line with its stations in physical track order.

    The color is presentation-only and plays no part in routing.
    """

    id: str
    name: str
    color: str = ""
    stations: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Normalise the station sequence to a list."""
        if not isinstance(self.stations, list):
            object.__setattr__(self, 'stations', list(self.stations))

    @property
    def station_count(self) -> int:
        """Get the number of stations on this line."""
        return len(self.stations)

    def has_station(self, station_id: str) -> bool:
        """Check if this line serves the given station."""
        return station_id in self.stations

    def station_pairs(self) -> List[Tuple[str, str]]:
        """Consecutive station pairs along the line, in track order."""
        return list(zip(self.stations, self.stations[1:]))

    def connects(self, station_a: str, station_b: str) -> bool:
        """
        Check whether two stations are physically consecutive on this line.

        Direction does not matter. A station that appears more than once
        (a loop line) is matched at every position it occupies.
        """
        for current_id, next_id in self.station_pairs():
            if (current_id == station_a and next_id == station_b) or \
               (current_id == station_b and next_id == station_a):
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Convert line to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "stations": list(self.stations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SubwayLine':
        """Create SubwayLine from dictionary representation."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            color=data.get("color", ""),
            stations=list(data.get("stations", [])),
        )

    def __repr__(self) -> str:
        return f"SubwayLine(id='{self.id}', name='{self.name}', stations={len(self.stations)})"
