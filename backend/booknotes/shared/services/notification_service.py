"""
Notification Service

Read side of the notification inbox: listing, unread badge, and marking
entries read. All operations are scoped to the requesting user.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.config.settings import settings
from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.enums import NotificationType
from booknotes.shared.repositories.notification_repository import NotificationRepository


logger = get_logger(__name__)


@dataclass
class NotificationEntry:
    """A notification enriched for display."""

    id: UUID
    type: NotificationType
    actor_id: UUID
    actor_name: str
    actor_avatar: Optional[str]
    book_id: Optional[UUID]
    book_title: Optional[str]
    comment_id: Optional[UUID]
    is_read: bool
    created_at: datetime


class NotificationService:
    """Service for the notification inbox."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = NotificationRepository(session)

    async def list_notifications(
        self,
        user_id: UUID,
        unread_only: bool = False,
    ) -> list[NotificationEntry]:
        """
        Get the user's most recent notifications, newest first.

        At most settings.NOTIFICATION_INBOX_LIMIT entries are returned.
        """
        rows = await self.repo.list_for_user(
            user_id,
            unread_only=unread_only,
            limit=settings.NOTIFICATION_INBOX_LIMIT,
        )
        return [
            NotificationEntry(
                id=notification.id,
                type=notification.type,
                actor_id=notification.actor_id,
                actor_name=actor_name or "",
                actor_avatar=actor_avatar,
                book_id=notification.book_id,
                book_title=book_title,
                comment_id=notification.comment_id,
                is_read=notification.is_read,
                created_at=notification.created_at,
            )
            for notification, book_title, actor_name, actor_avatar in rows
        ]

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> bool:
        """
        Mark a notification read.

        Unknown ids and other users' notifications are a silent no-op.

        Returns:
            True if a notification was updated
        """
        updated = await self.repo.mark_read(notification_id, user_id)
        if updated:
            logger.debug("Notification marked read", notification_id=str(notification_id))
        return updated > 0

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of the user read. Returns the number updated."""
        updated = await self.repo.mark_all_read(user_id)
        logger.debug("Notifications marked read", user_id=str(user_id), count=updated)
        return updated

    async def unread_count(self, user_id: UUID) -> int:
        return await self.repo.count_unread(user_id)
