"""
Network Graph Builder

Builds the weighted subway network graph with 3-D Euclidean distances.
"""

import logging

from ..models.subway_network import SubwayNetwork
from ..models.path_result import Graph


class NetworkGraphBuilder:
    """Builds an undirected adjacency mapping from a subway network."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def build_network_graph(self, network: SubwayNetwork) -> Graph:
        """
        Build a network graph from subway line data.

        Every station gets an entry, including stations no line touches.
        Each pair of consecutive stations on a line becomes a bidirectional
        edge weighted by the distance between their positions. Pairs naming
        an unknown station are skipped. When several lines join the same
        pair, the last line processed sets the weight.

        Args:
            network: Stations and lines to build from

        Returns:
            A new graph; the network is not modified
        """
        graph: Graph = {}

        for station in network.stations:
            graph.setdefault(station.id, {})

        skipped = 0
        for line in network.lines:
            for from_id, to_id in line.station_pairs():
                from_station = network.get_station(from_id)
                to_station = network.get_station(to_id)

                if from_station is None or to_station is None:
                    skipped += 1
                    self.logger.debug(f"Skipping connection {from_id} → {to_id} on {line.name}: unknown station")
                    continue

                distance = from_station.distance_to(to_station)

                graph[from_id][to_id] = distance
                graph[to_id][from_id] = distance

        total_connections = sum(len(neighbors) for neighbors in graph.values())
        self.logger.debug(
            f"Built network graph with {len(graph)} stations and {total_connections} connections"
            f" ({skipped} skipped)"
        )

        return graph
