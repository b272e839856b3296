"""
BookLike repository for data access.

A like is identified by its (book_id, user_id) pair, so the generic id-based
helpers of BaseRepository are not used here.
"""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.models.book_like import BookLike
from booknotes.shared.repositories.base import BaseRepository


class LikeRepository(BaseRepository[BookLike]):
    """Repository for BookLike entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(BookLike, session)

    async def exists_for(self, book_id: UUID, user_id: UUID) -> bool:
        """Check if the user currently likes the book."""
        stmt = select(BookLike.book_id).where(
            BookLike.book_id == book_id,
            BookLike.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add(self, book_id: UUID, user_id: UUID) -> bool:
        """
        Insert a like row inside a savepoint.

        Returns:
            True if the row was inserted, False if a concurrent request
            inserted the same pair first (primary key conflict)
        """
        try:
            async with self.session.begin_nested():
                self.session.add(BookLike(book_id=book_id, user_id=user_id))
        except IntegrityError:
            return False
        return True

    async def remove(self, book_id: UUID, user_id: UUID) -> bool:
        """
        Delete the like row for the pair.

        Returns:
            True if a row was deleted
        """
        result = await self.session.execute(
            delete(BookLike).where(
                BookLike.book_id == book_id,
                BookLike.user_id == user_id,
            )
        )
        return (result.rowcount or 0) > 0

    async def count_for_book(self, book_id: UUID) -> int:
        """Number of likes the book currently has."""
        result = await self.session.execute(
            select(func.count()).select_from(BookLike).where(BookLike.book_id == book_id)
        )
        return result.scalar() or 0
