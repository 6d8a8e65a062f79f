"""JSON persistence for provisioning state."""

from .state_store import JsonStateStore

__all__ = ["JsonStateStore"]
