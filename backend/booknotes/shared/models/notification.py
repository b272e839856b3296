"""
Notification Entity Model

An inbox entry telling a user that someone liked their book or replied to
them. Rows are only created by the fan-out service and only ever change by
having is_read flipped to true.

SAMPLE NOTIFICATION RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 990e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000  (recipient)         │
│ actor_id         │ 660e8400-e29b-41d4-a716-446655440000                      │
│ book_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ comment_id       │ NULL                                                      │
│ type             │ "like"                                                    │
│ is_read          │ false                                                     │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, Enum as SQLEnum, ForeignKey, Index, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booknotes.shared.models.base import Base, CreatedAtMixin
from booknotes.shared.models.enums import NotificationType


if TYPE_CHECKING:
    from booknotes.shared.models.user import User


class Notification(Base, CreatedAtMixin):
    """
    Notification model.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Recipient, never equal to actor_id
        actor_id: User whose like or reply triggered the notification
        book_id: Book involved, if any
        comment_id: The new reply, for ``reply`` notifications
        type: ``like`` or ``reply``
        is_read: Whether the recipient has seen it
    """

    __tablename__ = "notifications"
    __table_args__ = (Index("notifications_user_idx", "user_id", "is_read", "created_at"),)

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    actor_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    book_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=True,
    )

    comment_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # STATE
    # ═══════════════════════════════════════════════════════════════════════════

    type: Mapped[NotificationType] = mapped_column(
        SQLEnum(
            NotificationType,
            name="notificationtype",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )

    is_read: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=text("false"),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    recipient: Mapped["User"] = relationship(
        "User",
        foreign_keys=[user_id],
        back_populates="notifications",
    )

    actor: Mapped["User"] = relationship(
        "User",
        foreign_keys=[actor_id],
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<Notification(id={self.id}, user_id={self.user_id}, "
            f"type={self.type}, is_read={self.is_read})>"
        )
