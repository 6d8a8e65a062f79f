"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .driver_schema import DriverConfig
from .logging_schema import LogFileConfig, LoggingConfig
from .transport_schema import TransportConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "DriverConfig",
    "LoggingConfig",
    "LogFileConfig",
    "TransportConfig",
]
