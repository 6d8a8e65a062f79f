"""Infrastructure adapters."""

from .logging_adapter import LoggingAdapter

__all__ = ["LoggingAdapter"]
