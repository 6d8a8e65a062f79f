"""Configuration loading from files and environment."""
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml

from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILES = ("vro_driver.yml", "vro_driver.yaml", "vro_driver.json")

# Environment variable -> (driver option, converter)
ENV_OVERRIDES = {
    "VRO_BASE_URL": ("vro_base_url", str),
    "VRO_USERNAME": ("vro_username", str),
    "VRO_PASSWORD": ("vro_password", str),
    "VRO_DISABLE_SSL_VERIFY": ("vro_disable_ssl_verify", lambda v: v.strip().lower() in ("1", "true", "yes", "on")),
    "VRO_REQUEST_TIMEOUT": ("request_timeout", int),
}


class ConfigurationLoader:
    """Loads raw configuration data from YAML/JSON files and the environment."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def load_from_file(self, file_path: str) -> Dict[str, Any]:
        """
        Load a YAML or JSON configuration file.

        Raises:
            ConfigurationError: If the file is missing, unparsable or not a mapping
        """
        if not os.path.exists(file_path):
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if file_path.endswith(".json"):
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse configuration file {file_path}: {str(e)}",
                {"file": file_path},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        logger.debug(f"Loaded configuration from {file_path}")
        return expand_config_env_vars(data)

    def load_configuration(self, search_dir: str = ".") -> Dict[str, Any]:
        """Load the first default configuration file found in ``search_dir``."""
        for name in DEFAULT_CONFIG_FILES:
            path = os.path.join(search_dir, name)
            if os.path.exists(path):
                return self.load_from_file(path)
        logger.debug("No configuration file found, relying on environment")
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Override top-level driver options from ``VRO_*`` environment variables."""
        result = dict(config_data)
        driver = dict(result.get("driver") or {})

        for env_name, (option, convert) in ENV_OVERRIDES.items():
            raw = self._environ.get(env_name)
            if raw is None:
                continue
            try:
                driver[option] = convert(raw)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {env_name}: {raw!r}", {"variable": env_name}
                ) from e

        result["driver"] = driver
        return result
