"""
Structured logging configuration using structlog.

Library modules only log through ``get_logger``; ``configure_logging`` is for
the host application and is the only place settings are read.
"""

import logging
import sys
from typing import Any

import structlog

from exception_factory.infrastructure.config import get_settings


def configure_logging(stream: Any = None) -> None:
    """
    Configure structlog for applications that use exception-factory.

    Sets up:
    - Pretty console output for development
    - JSON output for production
    - Log level from settings
    """
    if stream is None:
        stream = sys.stderr
    settings = get_settings()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=settings.debug),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, settings.log_level.upper()),
        force=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    The logger always writes through the stdlib logger called ``name``, so
    library events stay silent until the host application enables them.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("exception_built", exception_class="ValueError")
    """
    return structlog.wrap_logger(logging.getLogger(name))
