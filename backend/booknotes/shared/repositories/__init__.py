"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Lookup by email
         ├── BookRepository             ← Enriched search, genres
         ├── LikeRepository             ← Toggle rows keyed by (book, user)
         ├── CommentRepository          ← Thread listing with authors
         └── NotificationRepository     ← Recipient-scoped inbox

Usage Example:
==============
    from booknotes.shared.repositories import BookRepository, LikeRepository

    async def like_count(db: AsyncSession, book_id: UUID) -> int:
        if await BookRepository(db).get(book_id) is None:
            raise BookNotFoundError(str(book_id))
        return await LikeRepository(db).count_for_book(book_id)
"""

from booknotes.shared.repositories.base import BaseRepository
from booknotes.shared.repositories.user_repository import UserRepository
from booknotes.shared.repositories.book_repository import BookRepository
from booknotes.shared.repositories.like_repository import LikeRepository
from booknotes.shared.repositories.comment_repository import CommentRepository
from booknotes.shared.repositories.notification_repository import NotificationRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "BookRepository",
    "LikeRepository",
    "CommentRepository",
    "NotificationRepository",
]
