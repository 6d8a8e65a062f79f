"""Configuration package with clean public API."""

from .loader import ConfigurationLoader
from .manager import ConfigurationManager
from .schemas import (
    AppConfig,
    DriverConfig,
    LogFileConfig,
    LoggingConfig,
    TransportConfig,
    validate_config,
)

__all__ = [
    "AppConfig",
    "validate_config",
    "DriverConfig",
    "LoggingConfig",
    "LogFileConfig",
    "TransportConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
]
