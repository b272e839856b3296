"""
API Dependencies

    DbSession    request-scoped AsyncSession (get_db)
    CurrentUser  User row of the bearer token's account (get_current_user)
    get_*_service() per-request service instances, see dependencies.services

    async def update_me(payload: UserUpdate, current_user: CurrentUser, db: DbSession):
        ...
"""

from booknotes.api.dependencies.database import DbSession, get_db
from booknotes.api.dependencies.auth import CurrentUser, get_current_user, get_token_claims

__all__ = [
    "get_db",
    "DbSession",
    "get_token_claims",
    "get_current_user",
    "CurrentUser",
]
