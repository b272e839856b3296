"""
Security Utilities

bcrypt password hashes (passlib) and HS256 access tokens (PyJWT).

Token claims:
=============
    user_id   account id as a string
    email     login email at issue time
    iat, exp  issue and expiry time, UTC

A token stays valid until ``exp`` even if the account is deleted; the API's
CurrentUser dependency reloads the user on every request and rejects tokens
whose account is gone.
"""

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Optional, Tuple

import jwt
from passlib.context import CryptContext

from booknotes.config.settings import settings

if TYPE_CHECKING:
    from booknotes.shared.models.user import User


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

DEFAULT_TOKEN_LIFETIME = timedelta(days=30)


class SecurityUtils:
    """Stateless helpers; every method is a staticmethod."""

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def create_access_token(
        claims: dict[str, Any],
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Sign ``claims`` with ``iat`` and ``exp`` added.

        Args:
            claims: Payload to sign; not modified
            secret_key: HMAC key
            expires_delta: Lifetime, 30 days when omitted
            algorithm: JWS algorithm
        """
        issued_at = datetime.now(timezone.utc)
        lifetime = DEFAULT_TOKEN_LIFETIME if expires_delta is None else expires_delta
        payload = {**claims, "iat": issued_at, "exp": issued_at + lifetime}
        return jwt.encode(payload, secret_key, algorithm=algorithm)

    @staticmethod
    def issue_user_token(user: "User") -> Tuple[str, int]:
        """
        Token for ``user`` using the configured key, algorithm and lifetime.

        Returns:
            (access_token, expires_in_seconds)
        """
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        token = SecurityUtils.create_access_token(
            {"user_id": str(user.id), "email": user.email},
            secret_key=settings.SECRET_KEY,
            expires_delta=lifetime,
            algorithm=settings.JWT_ALGORITHM,
        )
        return token, int(lifetime.total_seconds())

    @staticmethod
    def decode_access_token(token: str, secret_key: str, algorithm: str = "HS256") -> dict[str, Any]:
        """
        Verify signature and expiry and return the claims.

        Raises:
            ValueError: "Token has expired" or "Invalid token: <reason>"
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
