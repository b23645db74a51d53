"""
Pathfinding Algorithm

Handles Dijkstra's shortest path search over the subway network graph.
"""

import logging
import heapq
import math
from typing import Callable, Dict, List, Optional, Set, Tuple

from ..models.path_result import Graph, SearchResult


class PathfindingCancelledError(Exception):
    """Raised when a caller-supplied cancel check stops a search."""

    pass


class PathfindingAlgorithm:
    """
    Single-source shortest path search with early exit at the destination.

    Node selection is a linear scan over the unvisited nodes by default,
    which is plenty for networks of a few hundred stations. Pass
    ``use_priority_queue=True`` to select with a binary heap instead; the
    distances produced are the same either way.
    """

    def __init__(self, use_priority_queue: bool = False):
        self.use_priority_queue = use_priority_queue
        self.logger = logging.getLogger(__name__)

    def dijkstra(self, graph: Graph, start: str, end: str,
                 cancel_check: Optional[Callable[[], bool]] = None) -> Optional[SearchResult]:
        """
        Find shortest distances from ``start`` using Dijkstra's algorithm.

        The search stops as soon as ``end`` is selected, or when no unvisited
        node has a finite distance. Nodes never reached keep an infinite
        distance and no predecessor.

        Args:
            graph: Network graph
            start: Starting station id
            end: Destination station id
            cancel_check: Optional callable polled once per iteration

        Returns:
            SearchResult with distance and predecessor maps, or None when
            either station is not in the graph

        Raises:
            PathfindingCancelledError: If ``cancel_check`` returns true
        """
        if start not in graph:
            self.logger.warning(f"Start station '{start}' not found in network graph")
            return None

        if end not in graph:
            self.logger.warning(f"End station '{end}' not found in network graph")
            return None

        distances: Dict[str, float] = {node: math.inf for node in graph}
        predecessors: Dict[str, Optional[str]] = {node: None for node in graph}
        distances[start] = 0.0

        if self.use_priority_queue:
            nodes_explored = self._search_with_heap(graph, start, end, distances, predecessors, cancel_check)
        else:
            nodes_explored = self._search_with_scan(graph, end, distances, predecessors, cancel_check)

        self.logger.debug(
            f"Dijkstra from '{start}' to '{end}' explored {nodes_explored} nodes, "
            f"distance {distances[end]}"
        )
        return SearchResult(distances=distances, predecessors=predecessors)

    def _search_with_scan(self, graph: Graph, end: str,
                          distances: Dict[str, float], predecessors: Dict[str, Optional[str]],
                          cancel_check: Optional[Callable[[], bool]]) -> int:
        unvisited: Dict[str, None] = dict.fromkeys(graph)
        nodes_explored = 0

        while unvisited:
            self._check_cancelled(cancel_check)

            # First minimum in graph order wins ties
            current: Optional[str] = None
            min_distance = math.inf
            for node in unvisited:
                if distances[node] < min_distance:
                    min_distance = distances[node]
                    current = node

            if current is None:
                break

            nodes_explored += 1
            if current == end:
                break

            del unvisited[current]
            self._relax_neighbors(graph, current, distances, predecessors,
                                  lambda node: node not in unvisited)

        return nodes_explored

    def _search_with_heap(self, graph: Graph, start: str, end: str,
                          distances: Dict[str, float], predecessors: Dict[str, Optional[str]],
                          cancel_check: Optional[Callable[[], bool]]) -> int:
        queue: List[Tuple[float, str]] = [(0.0, start)]
        visited: Set[str] = set()
        nodes_explored = 0

        while queue:
            self._check_cancelled(cancel_check)

            current_distance, current = heapq.heappop(queue)
            if current in visited or current_distance > distances[current]:
                continue

            nodes_explored += 1
            if current == end:
                break

            visited.add(current)
            for neighbor in self._relax_neighbors(graph, current, distances, predecessors,
                                                  visited.__contains__):
                heapq.heappush(queue, (distances[neighbor], neighbor))

        return nodes_explored

    @staticmethod
    def _relax_neighbors(graph: Graph, current: str, distances: Dict[str, float],
                         predecessors: Dict[str, Optional[str]],
                         is_settled: Callable[[str], bool]) -> List[str]:
        """Relax every edge out of ``current`` and return the neighbours that improved."""
        improved = []
        for neighbor, weight in graph[current].items():
            if is_settled(neighbor):
                continue
            new_distance = distances[current] + weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                predecessors[neighbor] = current
                improved.append(neighbor)
        return improved

    @staticmethod
    def _check_cancelled(cancel_check: Optional[Callable[[], bool]]) -> None:
        if cancel_check is not None and cancel_check():
            raise PathfindingCancelledError("Shortest path search cancelled")
