"""
Core: structured logging and the application exception hierarchy.

    from booknotes.shared.core import get_logger, BookNotFoundError
"""

from booknotes.shared.core.logging import clear_log_context, get_logger, log_context, logger
from booknotes.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BookNotFoundError,
    BooknotesException,
    CommentNotFoundError,
    ConflictError,
    DuplicateResourceError,
    NotFoundError,
    ServiceUnavailableError,
    UserNotFoundError,
    ValidationError,
)

__all__ = [
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    "BooknotesException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "BookNotFoundError",
    "CommentNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
]
