"""
Data Repository Interface

Interface for loading subway network data.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from pathlib import Path

from ..models.station import Station
from ..models.subway_line import SubwayLine
from ..models.subway_network import SubwayNetwork


class NetworkDataError(Exception):
    """Raised when subway data cannot be read or has an invalid shape."""

    pass


class IDataRepository(ABC):
    """Interface for data repository operations."""

    @abstractmethod
    def load_network(self) -> SubwayNetwork:
        """
        Load the subway network from the configured data source.

        Returns:
            SubwayNetwork built from the source

        Raises:
            NetworkDataError: If the source is missing or malformed
        """
        pass

    @abstractmethod
    def load_network_from_file(self, path: Path) -> SubwayNetwork:
        """
        Load a subway network from a specific JSON file.

        Args:
            path: Path to the JSON document

        Raises:
            NetworkDataError: If the file is missing or malformed
        """
        pass

    @abstractmethod
    def parse_network(self, data: Dict[str, Any]) -> SubwayNetwork:
        """
        Validate already-decoded subway data and build a network from it.

        Raises:
            NetworkDataError: If the data has an invalid shape
        """
        pass

    @abstractmethod
    def refresh_data(self) -> bool:
        """Drop any cached network so the next load re-reads the source."""
        pass

    def load_stations(self) -> List[Station]:
        """Load all stations from the data source."""
        return list(self.load_network().stations)

    def load_lines(self) -> List[SubwayLine]:
        """Load all lines from the data source."""
        return list(self.load_network().lines)

    def get_station_by_id(self, station_id: str) -> Optional[Station]:
        """Get a station by its id."""
        return self.load_network().get_station(station_id)
