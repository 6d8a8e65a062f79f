"""Configuration management for the driver."""
from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import ValidationError

from src.config.loader import ConfigurationLoader
from src.config.schemas import AppConfig, DriverConfig, LoggingConfig, TransportConfig, validate_config
from src.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for driver configuration.

    Configuration is read from the given file (or a default file in the
    working directory), environment overrides are applied, and the result is
    validated once against ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        self._config_file = config_file
        self._loader = loader or ConfigurationLoader()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        if self._app_config is None:
            self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        if self._config_file:
            config_data = self._loader.load_from_file(self._config_file)
        else:
            config_data = self._loader.load_configuration(os.getcwd())

        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            return validate_config(config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}", {"errors": errors}
            ) from e

    @property
    def driver(self) -> DriverConfig:
        return self.app_config.driver

    @property
    def transport(self) -> TransportConfig:
        return self.app_config.transport

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging

    def reload(self) -> None:
        """Drop the cached configuration so the next access re-reads it."""
        self._app_config = None
