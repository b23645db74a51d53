"""
Service Factory

Factory for creating and managing core service instances.
"""

import logging
from typing import Optional

from ..interfaces.i_data_repository import IDataRepository
from ..interfaces.i_route_service import IRouteService
from .json_data_repository import JsonDataRepository
from .route_service import RouteService
from ...managers.config_manager import ConfigData


class ServiceFactory:
    """Factory for creating and managing core service instances."""

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize the service factory.

        Args:
            config: Application configuration, defaults when None
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ConfigData()

        self._data_repository: Optional[IDataRepository] = None
        self._route_service: Optional[IRouteService] = None

        self.logger.info(f"Initialized ServiceFactory with data file: {self.config.data.data_file or 'bundled'}")

    def get_data_repository(self) -> IDataRepository:
        """Get or create the data repository instance."""
        if self._data_repository is None:
            self._data_repository = JsonDataRepository(self.config.data.data_file)
            self.logger.info("Created JsonDataRepository instance")

        return self._data_repository

    def get_route_service(self) -> IRouteService:
        """Get or create the route service instance."""
        if self._route_service is None:
            self._route_service = RouteService(
                use_priority_queue=self.config.routing.use_priority_queue,
                cache_graph=self.config.routing.cache_graph,
            )
            self.logger.info("Created RouteService instance")

        return self._route_service

    def refresh_all_services(self) -> bool:
        """Refresh all service instances by clearing caches."""
        if self._data_repository is not None and not self._data_repository.refresh_data():
            self.logger.error("Failed to refresh data repository")
            return False

        if self._route_service is not None:
            self._route_service.clear_cache()

        self.logger.info("All services refreshed successfully")
        return True

    def shutdown(self) -> None:
        """Release service instances."""
        self._data_repository = None
        self._route_service = None
        self.logger.info("Services shut down")


_service_factory: Optional[ServiceFactory] = None


def get_service_factory(config: Optional[ConfigData] = None) -> ServiceFactory:
    """Get the global service factory, creating it on first use."""
    global _service_factory
    if _service_factory is None:
        _service_factory = ServiceFactory(config)
    return _service_factory


def get_data_repository() -> IDataRepository:
    """Get the data repository from the global factory."""
    return get_service_factory().get_data_repository()


def get_route_service() -> IRouteService:
    """Get the route service from the global factory."""
    return get_service_factory().get_route_service()


def shutdown_services() -> None:
    """Shut down and discard the global factory."""
    global _service_factory
    if _service_factory is not None:
        _service_factory.shutdown()
        _service_factory = None
