"""
User Repository

Account lookups by login email. Emails are stored lower-cased, so every
lookup normalizes its argument the same way.
"""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.repositories.base import BaseRepository
from booknotes.shared.models.user import User


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Account registered under ``email``, compared case-insensitively."""
        result = await self.session.execute(select(User).where(User.email == normalize_email(email)))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        stmt = select(exists().where(User.email == normalize_email(email)))
        return bool(await self.session.scalar(stmt))
