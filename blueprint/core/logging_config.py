"""
Logging Setup - Breakaway Blueprint
blueprint/core/logging_config.py

structlog on top of stdlib logging so module loggers from either library
share one level and one renderer.
"""

import logging
import sys

import structlog

from blueprint.config import settings


def configure_logging(level: str = None, fmt: str = None) -> None:
    """Configure stdlib logging and structlog from settings."""
    level = level or settings.LOG_LEVEL
    fmt = fmt or settings.LOG_FORMAT

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
