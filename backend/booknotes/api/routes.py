"""
Route Registration

    /health, /ready, /live   → probes, no prefix
    /api/auth                → register, login, me
    /api/users               → profile update, account deletion
    /api/genres              → genre catalogue
    /api/books               → books, likes, comment threads
    /api/notifications       → inbox

Every /api router documents the shared error envelope for the statuses its
handlers can produce.
"""

from typing import Any

from fastapi import FastAPI

from booknotes.api.handlers import (
    auth_handler,
    book_handler,
    genre_handler,
    health_handler,
    notification_handler,
    user_handler,
)
from booknotes.shared.schemas.common import ErrorResponse


API_PREFIX = "/api"


def _errors(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    return {code: {"model": ErrorResponse} for code in (400, 500, *status_codes)}


def register_routes(app: FastAPI) -> None:
    """Mount all routers on ``app``."""
    app.include_router(health_handler.router, tags=["Health"], responses=_errors(503))

    app.include_router(
        auth_handler.router,
        prefix=f"{API_PREFIX}/auth",
        tags=["Authentication"],
        responses=_errors(401, 409),
    )
    app.include_router(
        user_handler.router,
        prefix=f"{API_PREFIX}/users",
        tags=["Users"],
        responses=_errors(401),
    )
    app.include_router(
        genre_handler.router,
        prefix=f"{API_PREFIX}/genres",
        tags=["Books"],
    )
    app.include_router(
        book_handler.router,
        prefix=f"{API_PREFIX}/books",
        tags=["Books"],
        responses=_errors(401, 403, 404),
    )
    app.include_router(
        notification_handler.router,
        prefix=f"{API_PREFIX}/notifications",
        tags=["Notifications"],
        responses=_errors(401),
    )
