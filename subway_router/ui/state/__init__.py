"""
State management for the Subway Router application.
"""

from .subway_data_state import SubwayDataState

__all__ = ['SubwayDataState']
