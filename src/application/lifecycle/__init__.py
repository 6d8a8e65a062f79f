"""Server lifecycle orchestration."""

from .service import ServerLifecycleService

__all__ = ["ServerLifecycleService"]
