"""
Core Package

Core services, interfaces, and models for the subway routing engine.
"""

# Import interfaces
from .interfaces import IRouteService, IDataRepository, NetworkDataError

# Import models
from .models import Station, Position, SubwayLine, SubwayNetwork, PathResult, SearchResult, Graph

# Import services
from .services import (
    NetworkGraphBuilder, PathfindingAlgorithm, PathfindingCancelledError,
    PathReconstructor, RouteService, JsonDataRepository, ServiceFactory,
    compute_shortest_path, get_service_factory, get_data_repository,
    get_route_service, shutdown_services
)

__all__ = [
    # Interfaces
    'IRouteService',
    'IDataRepository',
    'NetworkDataError',

    # Models
    'Station',
    'Position',
    'SubwayLine',
    'SubwayNetwork',
    'PathResult',
    'SearchResult',
    'Graph',

    # Services
    'NetworkGraphBuilder',
    'PathfindingAlgorithm',
    'PathfindingCancelledError',
    'PathReconstructor',
    'RouteService',
    'JsonDataRepository',
    'ServiceFactory',

    # Entry point and factory functions
    'compute_shortest_path',
    'get_service_factory',
    'get_data_repository',
    'get_route_service',
    'shutdown_services'
]
