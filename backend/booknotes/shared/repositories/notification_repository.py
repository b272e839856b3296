"""
Notification Repository

Database operations for the notification inbox.

Every read and update here is scoped to the recipient: a user can never list
or mark another user's notifications.
"""

from uuid import UUID

from sqlalchemy import Row, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.models.book import Book
from booknotes.shared.models.notification import Notification
from booknotes.shared.models.user import User
from booknotes.shared.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    """Repository for Notification entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Notification, session)

    async def list_for_user(
        self,
        user_id: UUID,
        unread_only: bool = False,
        limit: int = 30,
    ) -> list[Row]:
        """
        Get a user's most recent notifications, newest first.

        Args:
            user_id: Recipient
            unread_only: Only return notifications with is_read = false
            limit: Maximum rows to return

        Returns:
            Rows of (Notification, book_title, actor_name, actor_avatar).
            book_title is None when the notification has no book.
        """
        stmt = (
            select(
                Notification,
                Book.title.label("book_title"),
                User.name.label("actor_name"),
                User.avatar_url.label("actor_avatar"),
            )
            .join(User, User.id == Notification.actor_id)
            .outerjoin(Book, Book.id == Notification.book_id)
            .where(Notification.user_id == user_id)
        )

        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))

        stmt = stmt.order_by(Notification.created_at.desc(), Notification.id.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return list(result.all())

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> int:
        """
        Mark one notification read if it belongs to the user.

        Returns:
            Number of rows updated (0 when the id is unknown or not the user's)
        """
        result = await self.session.execute(
            update(Notification)
            .where(
                Notification.id == notification_id,
                Notification.user_id == user_id,
            )
            .values(is_read=True)
        )
        return result.rowcount or 0

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of the user read."""
        result = await self.session.execute(
            update(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.is_read.is_(False),
            )
            .values(is_read=True)
        )
        return result.rowcount or 0

    async def count_unread(self, user_id: UUID) -> int:
        """Number of unread notifications for the user."""
        result = await self.session.execute(
            select(func.count())
            .select_from(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.is_read.is_(False),
            )
        )
        return result.scalar() or 0
