"""
Core Models Package

Data models for the subway routing engine.
"""

from .station import Station, Position
from .subway_line import SubwayLine
from .subway_network import SubwayNetwork
from .path_result import PathResult, SearchResult, Graph

__all__ = [
    'Station',
    'Position',
    'SubwayLine',
    'SubwayNetwork',
    'PathResult',
    'SearchResult',
    'Graph'
]
