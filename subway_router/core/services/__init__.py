"""
Core Services Package

Service implementations for the subway routing engine.
"""

from .network_graph_builder import NetworkGraphBuilder
from .pathfinding_algorithm import PathfindingAlgorithm, PathfindingCancelledError
from .path_reconstructor import PathReconstructor
from .route_service import RouteService, compute_shortest_path, get_default_route_service
from .json_data_repository import JsonDataRepository
from .service_factory import (
    ServiceFactory,
    get_service_factory,
    get_data_repository,
    get_route_service,
    shutdown_services
)

__all__ = [
    'NetworkGraphBuilder',
    'PathfindingAlgorithm',
    'PathfindingCancelledError',
    'PathReconstructor',
    'RouteService',
    'compute_shortest_path',
    'get_default_route_service',
    'JsonDataRepository',
    'ServiceFactory',
    'get_service_factory',
    'get_data_repository',
    'get_route_service',
    'shutdown_services'
]
