"""
Core Interfaces Package

Interface definitions for the subway routing services.
"""

from .i_route_service import IRouteService
from .i_data_repository import IDataRepository, NetworkDataError

__all__ = [
    'IRouteService',
    'IDataRepository',
    'NetworkDataError'
]
