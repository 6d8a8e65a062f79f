"""Provisioning bounded context."""

from .state import ProvisioningState

__all__ = ["ProvisioningState"]
