import os
import logging
import structlog
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from src.config.schemas.logging_schema import LoggingConfig

LOGGER_NAME = "vro_driver"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s"

# HTTP client libraries log every request at DEBUG
QUIET_LOGGERS = ("urllib3", "requests")


class DetailedFormatter(logging.Formatter):
    """Formatter that adds the caller's module, function and line to each record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=config.file.max_size_mb * 1024 * 1024,
                backupCount=config.file.backup_count,
            )
        )

    if config.destination in ("stdout", "both"):
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(DetailedFormatter(LOG_FORMAT))
    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the driver using structlog.

    Args:
        config: Logging configuration. Defaults are used when omitted.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    # Replace handlers from any earlier setup
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in _build_handlers(config):
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root_logger.level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(LOGGER_NAME)
    logger.debug("Logging configured", log_level=config.level, log_destination=config.destination)
    return logger


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
