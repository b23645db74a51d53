"""
Subway Data State Management for the Subway Router application.

This module holds the currently loaded subway network together with its
loading and error status, and exposes route lookups against it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from PySide6.QtCore import QObject, Signal

from ...core.interfaces.i_data_repository import IDataRepository, NetworkDataError
from ...core.interfaces.i_route_service import IRouteService
from ...core.models.subway_network import SubwayNetwork
from ...core.models.path_result import PathResult

logger = logging.getLogger(__name__)


class SubwayDataState(QObject):
    """Manages the loaded subway network and its load status."""

    # Signals
    data_changed = Signal(object)  # Emitted with the new SubwayNetwork
    loading_changed = Signal(bool)  # Emitted when a load starts or ends
    error_changed = Signal(str)  # Emitted with the error message, empty when cleared

    def __init__(self, data_repository: Optional[IDataRepository] = None,
                 route_service: Optional[IRouteService] = None, parent=None):
        """
        Initialize subway data state.

        Args:
            data_repository: Repository for reading subway data, global one when None
            route_service: Route service for path lookups, global one when None
        """
        super().__init__(parent)

        if data_repository is None or route_service is None:
            from ...core.services.service_factory import get_service_factory
            factory = get_service_factory()
            data_repository = data_repository or factory.get_data_repository()
            route_service = route_service or factory.get_route_service()

        self._data_repository = data_repository
        self._route_service = route_service

        self._subway_data: Optional[SubwayNetwork] = None
        self._loading: bool = False
        self._error: Optional[str] = None

    @property
    def subway_data(self) -> Optional[SubwayNetwork]:
        """Get the currently loaded network."""
        return self._subway_data

    @property
    def loading(self) -> bool:
        """Whether a load is in progress."""
        return self._loading

    @property
    def error(self) -> Optional[str]:
        """Message from the last failed load, None after a successful one."""
        return self._error

    def load_subway_data(self, data: Optional[Union[SubwayNetwork, Dict[str, Any]]] = None) -> bool:
        """
        Load subway data from the given value or from the repository.

        Failures are recorded in ``error`` and logged, not raised.

        Args:
            data: A network or decoded JSON data; None loads the configured file

        Returns:
            True if data was loaded
        """
        self._set_loading(True)
        self._set_error(None)

        try:
            if isinstance(data, SubwayNetwork):
                network = data
            elif data is not None:
                network = self._data_repository.parse_network(data)
            else:
                network = self._data_repository.load_network()
            self._set_subway_data(network)
            return True
        except NetworkDataError as e:
            self._set_error(str(e))
            logger.error(f"Error loading subway data: {e}")
            return False
        finally:
            self._set_loading(False)

    def import_subway_data_from_file(self, path: Union[str, Path]) -> None:
        """
        Import subway data from a JSON file.

        Raises:
            NetworkDataError: If the file cannot be read or is invalid
        """
        self._set_loading(True)
        self._set_error(None)

        try:
            network = self._data_repository.load_network_from_file(path)
            self._set_subway_data(network)
        except NetworkDataError as e:
            self._set_error(str(e))
            logger.error(f"Error importing subway data: {e}")
            raise
        finally:
            self._set_loading(False)

    def get_shortest_path(self, start_station_id: str, end_station_id: str) -> Optional[PathResult]:
        """Find the shortest path in the loaded network, None when nothing is loaded."""
        if self._subway_data is None:
            return None
        return self._route_service.compute_shortest_path(self._subway_data, start_station_id, end_station_id)

    def _set_subway_data(self, network: SubwayNetwork) -> None:
        self._subway_data = network
        self.data_changed.emit(network)
        logger.debug(f"Subway data updated: {network.station_count} stations, {network.line_count} lines")

    def _set_loading(self, loading: bool) -> None:
        if loading != self._loading:
            self._loading = loading
            self.loading_changed.emit(loading)

    def _set_error(self, error: Optional[str]) -> None:
        if error != self._error:
            self._error = error
            self.error_changed.emit(error or "")
