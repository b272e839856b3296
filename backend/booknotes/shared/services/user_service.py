"""
User Service

Profile management for the signed-in user.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.core.exceptions import UserNotFoundError
from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.user import User
from booknotes.shared.repositories.user_repository import UserRepository


logger = get_logger(__name__)


class UserService:
    """Service for reading, editing and deleting a user's own profile."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def get_profile(self, user_id: UUID) -> User:
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    async def update_profile(
        self,
        user_id: UUID,
        name: Optional[str] = None,
        address: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """
        Update profile fields. Arguments left as None keep their value.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.repo.update(
            user_id,
            name=name.strip() if name is not None else None,
            address=address,
            avatar_url=avatar_url,
        )
        if not user:
            raise UserNotFoundError(str(user_id))

        logger.info("Profile updated", user_id=str(user_id))
        return user

    async def delete_account(self, user_id: UUID) -> None:
        """
        Delete the user and everything they own.

        Books, likes, comments and notifications (received or caused) are
        removed by foreign key cascades.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        if not await self.repo.delete(user_id):
            raise UserNotFoundError(str(user_id))
        logger.info("Account deleted", user_id=str(user_id))
