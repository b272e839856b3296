"""
BookLike Entity Model

Junction table between Users and Books. The presence of a row is the
"liked" state; the composite primary key makes a second like by the same
user impossible.

SAMPLE BOOK_LIKE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ book_id          │ 770e8400-e29b-41d4-a716-446655440000                      │
│ user_id          │ 660e8400-e29b-41d4-a716-446655440000                      │
│ created_at       │ 2024-01-15T10:31:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING
import uuid

from sqlalchemy import ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from booknotes.shared.models.base import Base, CreatedAtMixin


if TYPE_CHECKING:
    from booknotes.shared.models.book import Book
    from booknotes.shared.models.user import User


class BookLike(Base, CreatedAtMixin):
    """
    BookLike model - one user's like on one book.

    Attributes:
        book_id: The liked book (part of composite PK)
        user_id: The user who liked it (part of composite PK)

    Relationships:
        book: The liked book
        user: The user who liked it
    """

    __tablename__ = "book_likes"
    __table_args__ = (Index("book_likes_user_idx", "user_id", "created_at"),)

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    book_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    book: Mapped["Book"] = relationship(
        "Book",
        back_populates="likes",
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="likes",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<BookLike(book_id={self.book_id}, user_id={self.user_id})>"
