"""
Route Service Interface

Interface for shortest-path route calculation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.subway_network import SubwayNetwork
from ..models.path_result import PathResult


class IRouteService(ABC):
    """Interface for route calculation services."""

    @abstractmethod
    def compute_shortest_path(self, network: SubwayNetwork, start_station_id: str,
                              end_station_id: str) -> Optional[PathResult]:
        """
        Calculate the minimum-distance route between two stations.

        Args:
            network: Stations and lines to route over
            start_station_id: Id of the starting station
            end_station_id: Id of the destination station

        Returns:
            PathResult if a route exists, None if either station is unknown
            or the stations are not connected
        """
        pass

    @abstractmethod
    def clear_cache(self) -> None:
        """Drop any cached graph data."""
        pass
