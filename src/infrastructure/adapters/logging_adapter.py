"""Logging adapter implementing LoggingPort over structlog."""

from typing import Any, Optional

from src.domain.base.ports import LoggingPort
from src.helpers.logger import LOGGER_NAME, get_logger


class LoggingAdapter(LoggingPort):
    """Adapter that forwards port calls to a structlog bound logger."""

    def __init__(self, name: str = LOGGER_NAME, logger: Optional[Any] = None):
        self._logger = logger if logger is not None else get_logger(name)

    def bind(self, **context: Any) -> "LoggingAdapter":
        """Return an adapter whose messages carry ``context``."""
        return LoggingAdapter(logger=self._logger.bind(**context))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)
