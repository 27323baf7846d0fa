"""Logging configuration for the Placement domain."""

import logging
import os
import sys

import structlog


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Configure structlog on top of the standard library logger.

    Args:
        level: Log level name. Defaults to ``LOG_LEVEL`` or ``INFO``.
        json: Render JSON lines instead of the console format. Defaults to
            ``LOG_FORMAT == "json"``.
    """
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if json is None:
        json = os.environ.get("LOG_FORMAT", "").lower() == "json"

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    # Suppress noisy library loggers
    logging.getLogger("protean").setLevel(logging.WARNING)


def get_logger(name: str):
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
