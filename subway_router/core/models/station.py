"""
Station Model

Pure data model for subway stations positioned in 3-D space.
"""

import math
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class Position:
    """A point in 3-D space."""

    x: float
    y: float
    z: float

    def distance_to(self, other: 'Position') -> float:
        """Euclidean distance to another position."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Position':
        return cls(x=float(data["x"]), y=float(data["y"]), z=float(data["z"]))


@dataclass(frozen=True)
class Station:
    """
    Immutable data class representing a subway station.

    The id is the routing key; the name is for display only.
    """

    id: str
    name: str
    position: Position

    def __post_init__(self):
        """Validate station data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Station id cannot be empty")

    def distance_to(self, other: 'Station') -> float:
        """Straight-line distance between this station and another."""
        return self.position.distance_to(other.position)

    def get_display_name(self) -> str:
        """Get the display name for the station."""
        return self.name or self.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Station':
        """Create Station from dictionary representation."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            position=Position.from_dict(data["position"]),
        )

    def __str__(self) -> str:
        return self.get_display_name()

    def __repr__(self) -> str:
        return f"Station(id='{self.id}', name='{self.name}')"
