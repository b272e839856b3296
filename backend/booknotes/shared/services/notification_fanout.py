"""
Notification Fan-out

Creates the inbox entry that follows a like or a reply.

Fan-out always runs AFTER the triggering like or comment has been committed,
so a notification never exists for an action that did not happen. The
reverse is allowed: if writing the notification fails, the error is logged
and reported in the returned FanoutResult, and the caller carries on.

Triggers:
=========
    like created          → book author      (type=like)
    root comment created  → book author      (type=reply)
    reply created         → parent's author  (type=reply)

Nobody is notified about their own action.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.enums import NotificationType
from booknotes.shared.repositories.notification_repository import NotificationRepository


logger = get_logger(__name__)


class FanoutStatus(str, Enum):
    """Outcome of a single fan-out attempt."""

    CREATED = "created"
    SELF = "self"
    NO_RECIPIENT = "no_recipient"
    FAILED = "failed"


@dataclass(frozen=True)
class FanoutResult:
    """Side-channel result of NotificationFanout.notify()."""

    status: FanoutStatus
    notification_id: Optional[UUID] = None
    error: Optional[str] = None

    @property
    def created(self) -> bool:
        return self.status is FanoutStatus.CREATED


class NotificationFanout:
    """
    Writes notifications for committed likes and comments.

    Attributes:
        session: Database session shared with the calling service
        repo: NotificationRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = NotificationRepository(session)

    async def notify(
        self,
        recipient_id: Optional[UUID],
        actor_id: UUID,
        kind: NotificationType,
        book_id: Optional[UUID] = None,
        comment_id: Optional[UUID] = None,
    ) -> FanoutResult:
        """
        Create and commit one unread notification for the recipient.

        Never raises for persistence errors. A failed write is rolled back,
        logged at warning level and returned as FanoutStatus.FAILED.

        Note:
            The rollback after a failure expires every object loaded in the
            session. Callers must not read ORM attributes afterwards without
            refreshing them.
        """
        if recipient_id is None:
            return FanoutResult(status=FanoutStatus.NO_RECIPIENT)

        if recipient_id == actor_id:
            return FanoutResult(status=FanoutStatus.SELF)

        try:
            async with self.session.begin_nested():
                notification = await self.repo.create(
                    user_id=recipient_id,
                    actor_id=actor_id,
                    type=kind,
                    book_id=book_id,
                    comment_id=comment_id,
                    is_read=False,
                )
            notification_id = notification.id
            await self.session.commit()

        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning(
                "Notification fan-out failed",
                recipient_id=str(recipient_id),
                actor_id=str(actor_id),
                type=kind.value,
                book_id=str(book_id) if book_id else None,
                comment_id=str(comment_id) if comment_id else None,
                error=str(e),
            )
            return FanoutResult(status=FanoutStatus.FAILED, error=str(e))

        logger.info(
            "Notification created",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
            type=kind.value,
        )
        return FanoutResult(status=FanoutStatus.CREATED, notification_id=notification_id)
