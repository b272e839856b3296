"""
Book Entity Model

A user-authored book summary.

SAMPLE BOOK RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ title            │ "Atomic Habits"                                           │
│ content          │ "Small habits compound..."                                │
│ genres           │ ["self-help", "psychology"]                               │
│ cover_url        │ "/uploads/1712345678-cover.jpg"                           │
│ source_url       │ "https://jamesclear.com/atomic-habits"                    │
│ created_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booknotes.shared.models.base import Base, CreatedAtMixin


if TYPE_CHECKING:
    from booknotes.shared.models.user import User
    from booknotes.shared.models.book_like import BookLike
    from booknotes.shared.models.comment import Comment


class Book(Base, CreatedAtMixin):
    """
    Book model - a summary post owned by its author.

    The author (user_id) never changes; every other field may be edited by the
    author only.

    Attributes:
        id: Unique identifier (UUID v4)
        user_id: Author of the summary
        title: Book title
        content: Summary body
        genres: Ordered genre labels (at most 10, trimmed, non-empty)
        cover_url: Reference to an uploaded cover image
        source_url: Optional external link

    Relationships:
        author: The user who wrote the summary
        likes: Like rows pointing at this book
        comments: Every comment (root or reply) on this book
    """

    __tablename__ = "books"
    __table_args__ = (Index("books_user_idx", "user_id", "created_at"),)

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

    # ═══════════════════════════════════════════════════════════════════════════
    # SUMMARY
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    genres: Mapped[list[str]] = mapped_column(
        nullable=False,
        default=list,
    )

    cover_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    source_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    author: Mapped["User"] = relationship(
        "User",
        back_populates="books",
    )

    likes: Mapped[list["BookLike"]] = relationship(
        "BookLike",
        back_populates="book",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment",
        back_populates="book",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Book(id={self.id}, title={self.title!r})>"
