"""
Logging Configuration

Structured logging for the ticketing API using structlog.

Output:
=======
Development (colored console):
    2025-03-02T10:30:00Z [info     ] Event created    [ticketing.events] event_id=12 venue_id=3

Other environments (JSON, one object per line):
    {"event": "Event created", "event_id": 12, "level": "info", "logger": "ticketing.events", ...}

Usage:
======
    from ticketing_api.shared.core.logging import get_logger, log_context

    logger = get_logger("ticketing.events")
    logger.info("Event created", event_id=event.id)

    # Bind request-scoped values for every later log line
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from ticketing_api.config.settings import settings


def setup_logging(level: str = settings.LOG_LEVEL, json_output: bool = not settings.is_development) -> None:
    """
    Configure structlog on top of the standard logging module.

    Args:
        level: Minimum level name (DEBUG, INFO, ...)
        json_output: Render JSON instead of the colored console format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, optionally namespaced."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to every subsequent log call in this context.

    Backed by contextvars, so values stay within the current request task.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all values bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("ticketing")
