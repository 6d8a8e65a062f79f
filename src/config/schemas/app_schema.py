"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .driver_schema import DriverConfig
from .logging_schema import LoggingConfig
from .transport_schema import TransportConfig


class AppConfig(BaseModel):
    """Application configuration."""

    driver: DriverConfig
    transport: TransportConfig = Field(default_factory=lambda: TransportConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
