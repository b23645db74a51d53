"""
Path Reconstructor

Turns a shortest-path search into an ordered route with the lines it uses.
"""

import logging
from typing import List, Optional, Set

from ..models.subway_network import SubwayNetwork
from ..models.path_result import PathResult, SearchResult


class PathReconstructor:
    """Rebuilds station routes from predecessor links."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def reconstruct(self, search: SearchResult, network: SubwayNetwork,
                    start: str, end: str) -> Optional[PathResult]:
        """
        Reconstruct the route from ``start`` to ``end``.

        Args:
            search: Distances and predecessors from the solver
            network: Network the search ran over
            start: Starting station id
            end: Destination station id

        Returns:
            PathResult, or None when the predecessor chain from ``end``
            does not lead back to ``start``
        """
        path = self.walk_predecessors(search, end)

        if not path or path[0] != start:
            self.logger.info(f"No route from '{start}' to '{end}'")
            return None

        # Unresolvable ids are dropped rather than failing the route
        stations = [station for station in (network.get_station(sid) for sid in path)
                    if station is not None]

        return PathResult(
            stations=stations,
            total_distance=search.distance_to(end),
            lines=frozenset(self.find_lines_used(path, network)),
        )

    @staticmethod
    def walk_predecessors(search: SearchResult, end: str) -> List[str]:
        """Follow predecessor links back from ``end``; returns ids in start-to-end order."""
        path: List[str] = []
        current: Optional[str] = end

        while current is not None:
            path.append(current)
            current = search.predecessors.get(current)

        path.reverse()
        return path

    @staticmethod
    def find_lines_used(path: List[str], network: SubwayNetwork) -> Set[str]:
        """Names of every line on which some hop of the path is a consecutive pair."""
        lines_used: Set[str] = set()

        for current_id, next_id in zip(path, path[1:]):
            for line in network.lines:
                if line.connects(current_id, next_id):
                    lines_used.add(line.name)

        return lines_used
