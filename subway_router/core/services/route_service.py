"""
Route Service Implementation

Runs the graph build, shortest path search and path reconstruction pipeline.
"""

import logging
import threading
from typing import Callable, Optional

from ..interfaces.i_route_service import IRouteService
from ..models.subway_network import SubwayNetwork
from ..models.path_result import Graph, PathResult
from .network_graph_builder import NetworkGraphBuilder
from .pathfinding_algorithm import PathfindingAlgorithm
from .path_reconstructor import PathReconstructor


class RouteService(IRouteService):
    """Service implementation for minimum-distance routing."""

    def __init__(self, use_priority_queue: bool = False, cache_graph: bool = False):
        """
        Initialize the route service with its pipeline components.

        Args:
            use_priority_queue: Select nodes with a binary heap instead of a linear scan
            cache_graph: Reuse the graph while the same network object is queried
        """
        self.logger = logging.getLogger(__name__)

        self.network_builder = NetworkGraphBuilder()
        self.pathfinder = PathfindingAlgorithm(use_priority_queue=use_priority_queue)
        self.path_reconstructor = PathReconstructor()

        self.cache_graph = cache_graph
        self._cache_lock = threading.Lock()
        self._cached_network: Optional[SubwayNetwork] = None
        self._cached_graph: Optional[Graph] = None

    def compute_shortest_path(self, network: SubwayNetwork, start_station_id: str,
                              end_station_id: str,
                              cancel_check: Optional[Callable[[], bool]] = None) -> Optional[PathResult]:
        """Calculate the minimum-distance route between two stations."""
        graph = self._get_graph(network)

        search = self.pathfinder.dijkstra(graph, start_station_id, end_station_id, cancel_check)
        if search is None:
            return None

        result = self.path_reconstructor.reconstruct(search, network, start_station_id, end_station_id)
        if result is not None:
            self.logger.info(
                f"Route {start_station_id} → {end_station_id}: {result.station_count} stations, "
                f"distance {result.total_distance:.2f}, lines {sorted(result.lines)}"
            )
        return result

    def clear_cache(self) -> None:
        """Clear the cached network graph."""
        with self._cache_lock:
            self._cached_network = None
            self._cached_graph = None
        self.logger.debug("Network graph cache cleared")

    def _get_graph(self, network: SubwayNetwork) -> Graph:
        if not self.cache_graph:
            return self.network_builder.build_network_graph(network)

        # Networks are immutable, so object identity is a safe cache key
        with self._cache_lock:
            if self._cached_network is not network:
                self._cached_graph = self.network_builder.build_network_graph(network)
                self._cached_network = network
            return self._cached_graph


_default_route_service: Optional[RouteService] = None


def get_default_route_service() -> RouteService:
    """Get the shared route service used by ``compute_shortest_path``."""
    global _default_route_service
    if _default_route_service is None:
        _default_route_service = RouteService()
    return _default_route_service


def compute_shortest_path(network: SubwayNetwork, start_station_id: str,
                          end_station_id: str) -> Optional[PathResult]:
    """
    Find the minimum-distance route between two stations.

    Returns None when either id is unknown or no sequence of line edges
    connects the two stations.
    """
    return get_default_route_service().compute_shortest_path(network, start_station_id, end_station_id)
