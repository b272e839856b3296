"""
Notification Schemas

Response models for the notification inbox.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from booknotes.shared.models.enums import NotificationType
from booknotes.shared.schemas.common import BaseSchema
from booknotes.shared.services.notification_service import NotificationEntry


class NotificationResponse(BaseSchema):
    """One inbox entry."""

    id: str
    type: NotificationType
    actor_id: str
    actor_name: str
    actor_avatar: Optional[str] = None
    book_id: Optional[str] = None
    book_title: Optional[str] = None
    comment_id: Optional[str] = None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: NotificationEntry) -> "NotificationResponse":
        return cls(
            id=str(entry.id),
            type=entry.type,
            actor_id=str(entry.actor_id),
            actor_name=entry.actor_name,
            actor_avatar=entry.actor_avatar,
            book_id=str(entry.book_id) if entry.book_id else None,
            book_title=entry.book_title,
            comment_id=str(entry.comment_id) if entry.comment_id else None,
            is_read=entry.is_read,
            created_at=entry.created_at,
        )


class UnreadCountResponse(BaseModel):
    """Unread badge value."""

    count: int


class MarkReadResponse(BaseModel):
    """Result of a mark-read request. ``updated`` is 0 for a no-op."""

    success: bool = True
    updated: int
