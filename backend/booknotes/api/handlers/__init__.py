"""
API Handlers

Route handlers for the Booknotes API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from booknotes.api.handlers import (
    auth_handler,
    book_handler,
    genre_handler,
    health_handler,
    notification_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "book_handler",
    "genre_handler",
    "health_handler",
    "notification_handler",
    "user_handler",
]
