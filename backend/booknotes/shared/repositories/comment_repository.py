"""
Comment repository for data access.
"""

from uuid import UUID

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.models.comment import Comment
from booknotes.shared.models.user import User
from booknotes.shared.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Comment, session)

    async def list_for_book(self, book_id: UUID) -> list[Row]:
        """
        Get every comment of a book with its author's name and avatar.

        Ordered by creation time ascending, ties broken by id, which is the
        order the thread builder expects.

        Returns:
            Rows of (Comment, author_name, author_avatar)
        """
        stmt = (
            select(
                Comment,
                User.name.label("author_name"),
                User.avatar_url.label("author_avatar"),
            )
            .join(User, User.id == Comment.user_id)
            .where(Comment.book_id == book_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.all())
