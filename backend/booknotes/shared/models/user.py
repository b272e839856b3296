"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── books (Book[])           - Summaries written by the user
       ├── comments (Comment[])     - Comments and replies by the user
       ├── likes (BookLike[])       - Books the user liked
       └── notifications (Notification[]) - Inbox of the user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ name             │ "Linh"                                                    │
│ email            │ "linh@example.com"                                        │
│ address          │ "Hanoi"                                                   │
│ avatar_url       │ "/uploads/1712345678-abc.png"                             │
│ password_hash    │ "$2b$12$..."                                              │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booknotes.shared.models.base import Base, CreatedAtMixin


# TYPE_CHECKING block prevents circular imports while enabling type hints
if TYPE_CHECKING:
    from booknotes.shared.models.book import Book
    from booknotes.shared.models.book_like import BookLike
    from booknotes.shared.models.comment import Comment
    from booknotes.shared.models.notification import Notification


class User(Base, CreatedAtMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Unique identifier (UUID v4)
        name: Display name shown next to books, comments and notifications
        email: Lower-cased email address (unique, indexed)
        address: Free-form profile field
        avatar_url: Reference to an avatar stored elsewhere
        password_hash: Bcrypt hashed password
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default="",
    )

    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    # Stored lower-cased so uniqueness is case-insensitive
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="author",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    likes: Mapped[list["BookLike"]] = relationship(
        "BookLike",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    notifications: Mapped[list["Notification"]] = relationship(
        "Notification",
        foreign_keys="Notification.user_id",
        back_populates="recipient",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
