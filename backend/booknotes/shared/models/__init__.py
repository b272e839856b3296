"""
Booknotes SQLAlchemy Models

This package contains all database models for the Booknotes application.

Model Hierarchy:
================
    User
       ├── books (Book[])
       │      ├── likes (BookLike[])
       │      └── comments (Comment[])   ← self-referencing via parent_id
       ├── likes (BookLike[])
       ├── comments (Comment[])
       └── notifications (Notification[])

Models Overview:
================
- Base: Base class and the created_at mixin
- User: Registered application user
- Book: A book summary written by a user
- BookLike: One user's like on one book (composite key)
- Comment: Comment or reply on a book
- Notification: Like/reply inbox entry

Usage:
======
    from booknotes.shared.models import User, Book, BookLike, Comment, Notification
"""

from booknotes.shared.models.base import Base, CreatedAtMixin
from booknotes.shared.models.enums import NotificationType
from booknotes.shared.models.user import User
from booknotes.shared.models.book import Book
from booknotes.shared.models.book_like import BookLike
from booknotes.shared.models.comment import Comment
from booknotes.shared.models.notification import Notification

__all__ = [
    # Base classes and mixins
    "Base",
    "CreatedAtMixin",
    # Enums
    "NotificationType",
    # Core models
    "User",
    "Book",
    "BookLike",
    "Comment",
    "Notification",
]
