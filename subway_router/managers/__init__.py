"""
Managers package for the Subway Router application.
"""

from .config_manager import (
    ConfigManager,
    ConfigData,
    DataConfig,
    RoutingConfig,
    LoggingConfig,
    ConfigurationError,
)

__all__ = [
    'ConfigManager',
    'ConfigData',
    'DataConfig',
    'RoutingConfig',
    'LoggingConfig',
    'ConfigurationError'
]
