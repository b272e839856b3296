"""
Authentication Dependencies

    Authorization: Bearer <jwt>
        │
        ▼
    get_token_claims()   401 if the header is missing, the signature is bad
        │                or the token has expired
        ▼
    get_current_user()   401 if the claims carry no usable user_id or the
                         account no longer exists

    CurrentUser = Annotated[User, Depends(get_current_user)]
"""

from typing import Annotated, Any, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from booknotes.api.dependencies.database import DbSession
from booknotes.config.settings import settings
from booknotes.shared.core.exceptions import AuthenticationError
from booknotes.shared.models.user import User
from booknotes.shared.repositories.user_repository import UserRepository
from booknotes.shared.utils.security import SecurityUtils


# auto_error=False: a missing header must produce our 401 envelope, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_claims(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> dict[str, Any]:
    if credentials is None:
        raise AuthenticationError("Authorization header required")
    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    claims: Annotated[dict[str, Any], Depends(get_token_claims)],
    db: DbSession,
) -> User:
    try:
        user_id = UUID(str(claims.get("user_id")))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    user = await UserRepository(db).get(user_id)
    if user is None:
        raise AuthenticationError("User no longer exists")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
