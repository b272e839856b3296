"""
Authentication Service

Account registration and password login. Both return an AuthResult holding
the user and a freshly issued access token.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.user import User
from booknotes.shared.repositories.user_repository import UserRepository, normalize_email
from booknotes.shared.utils.security import SecurityUtils


logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class AuthResult:
    user: User
    access_token: str
    expires_in: int

    @classmethod
    def for_user(cls, user: User) -> "AuthResult":
        access_token, expires_in = SecurityUtils.issue_user_token(user)
        return cls(user=user, access_token=access_token, expires_in=expires_in)


class AuthService:
    """Registration and login against the users table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(
        self,
        email: str,
        password: str,
        name: str = "",
        address: Optional[str] = None,
    ) -> AuthResult:
        """
        Create an account and sign the user in.

        The email is stored lower-cased, so registration is case-insensitive
        on email.

        Raises:
            DuplicateResourceError: The email is already registered
        """
        email = normalize_email(email)
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered", details={"field": "email"})

        user = await self.repo.create(
            email=email,
            password_hash=SecurityUtils.hash_password(password),
            name=(name or "").strip(),
            address=address or None,
        )
        logger.info("User registered", user_id=str(user.id))
        return AuthResult.for_user(user)

    async def login_user(self, email: str, password: str) -> AuthResult:
        """
        Check a password and issue a token.

        Raises:
            AuthenticationError: Unknown email or wrong password (same message for both)
        """
        user = await self.repo.get_by_email(email)
        if user is None or not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Login rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)
        return AuthResult.for_user(user)
