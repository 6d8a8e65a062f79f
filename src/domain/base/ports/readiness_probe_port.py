"""Port for confirming a provisioned server is usable."""
from abc import ABC, abstractmethod

from src.domain.provisioning.state import ProvisioningState


class ReadinessProbePort(ABC):
    """Blocks until a provisioned server is ready, or fails."""

    @abstractmethod
    def wait_until_ready(self, state: ProvisioningState) -> None:
        """Return once the server described by ``state`` is reachable; raise otherwise."""
