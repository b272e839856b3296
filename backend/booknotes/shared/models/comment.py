"""
Comment Entity Model

A comment on a book, or a reply to another comment on the same book.

Comments of a book form a forest: parent_id is NULL for root comments and
points at an earlier comment otherwise. Deleting a comment removes its whole
subtree through the self-referencing cascade.

SAMPLE COMMENT RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 880e8400-e29b-41d4-a716-446655440000                      │
│ book_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ content          │ "Chapter 3 was the best part."                            │
│ parent_id        │ NULL                                                      │
│ created_at       │ 2024-01-15T10:32:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booknotes.shared.models.base import Base, CreatedAtMixin


if TYPE_CHECKING:
    from booknotes.shared.models.book import Book
    from booknotes.shared.models.user import User


class Comment(Base, CreatedAtMixin):
    """
    Comment model. Never edited after creation.

    Attributes:
        id: Unique identifier (UUID v4)
        book_id: Book the comment belongs to
        user_id: Author of the comment
        content: Trimmed, non-empty body
        parent_id: Comment being replied to, NULL for a root comment
    """

    __tablename__ = "comments"
    __table_args__ = (Index("comments_book_idx", "book_id", "created_at"),)

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

    book_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("books.id", ondelete="CASCADE"),
        nullable=False,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    parent_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # BODY
    # ═══════════════════════════════════════════════════════════════════════════

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    book: Mapped["Book"] = relationship(
        "Book",
        back_populates="comments",
    )

    author: Mapped["User"] = relationship(
        "User",
        back_populates="comments",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Comment(id={self.id}, book_id={self.book_id}, parent_id={self.parent_id})>"
