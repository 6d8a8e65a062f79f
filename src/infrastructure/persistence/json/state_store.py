"""JSON file store for provisioning state."""

import json
import logging
import os

from src.domain.provisioning.state import ProvisioningState
from src.infrastructure.exceptions import StateStoreError
from src.infrastructure.utilities.file.json_utils import read_json_file, write_json_file

logger = logging.getLogger(__name__)


class JsonStateStore:
    """Keeps the state of one driver-managed server in a JSON file."""

    def __init__(self, file_path: str):
        self.file_path = file_path

    def exists(self) -> bool:
        return os.path.exists(self.file_path)

    def load(self) -> ProvisioningState:
        """
        Load the stored state.

        Returns:
            The stored state, or an empty state when no file exists yet

        Raises:
            StateStoreError: If the file exists but cannot be parsed
        """
        if not self.exists():
            logger.debug(f"No state file at {self.file_path}, starting empty")
            return ProvisioningState()

        try:
            data = read_json_file(self.file_path)
        except (OSError, json.JSONDecodeError) as e:
            raise StateStoreError(f"Failed to read state file {self.file_path}: {str(e)}") from e

        if not isinstance(data, dict):
            raise StateStoreError(f"State file {self.file_path} does not contain a JSON object")
        return ProvisioningState.from_dict(data)

    def save(self, state: ProvisioningState) -> None:
        """Write ``state``, replacing any previous content."""
        try:
            write_json_file(self.file_path, state.to_dict())
        except (OSError, TypeError) as e:
            raise StateStoreError(str(e)) from e
        logger.debug(f"Saved state to {self.file_path}")

    def delete(self) -> None:
        """Remove the state file if present."""
        if self.exists():
            os.remove(self.file_path)
            logger.debug(f"Deleted state file {self.file_path}")
