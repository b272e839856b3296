"""
Logging Configuration

structlog on top of the standard library logging module. Importing this
module configures logging once for the whole process.

Output:
=======
Development (colored console):
    2024-01-15T10:30:00Z [info     ] Like added   [booknotes.shared.services.like_service] book_id=770e... request_id=5f1c...

Anything else (one JSON object per line):
    {"event": "Notification fan-out failed", "level": "warning", "recipient_id": "550e...", "timestamp": "..."}

Usage:
======
    from booknotes.shared.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Comment created", comment_id=str(comment.id), is_reply=True)

Request context (bound by RequestContextMiddleware):
    log_context(request_id="5f1c...", path="/api/books")
    ...
    clear_log_context()
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from booknotes.config.settings import settings


def setup_logging() -> None:
    """Route structlog through stdlib logging at settings.LOG_LEVEL."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    if settings.is_development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Named structured logger; pass ``__name__`` from the calling module."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Attach key-value pairs to every log line of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("booknotes")
