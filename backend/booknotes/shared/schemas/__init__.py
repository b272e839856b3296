"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, error and health responses
- user: User, profile and authentication schemas
- book: Book summaries, likes
- comment: Comment threads
- notification: Inbox entries

Usage:
======
    from booknotes.shared.schemas.user import UserCreate, UserResponse, AuthResponse
    from booknotes.shared.schemas.common import ErrorResponse
"""

from booknotes.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from booknotes.shared.schemas.user import (
    UserCreate,
    UserLogin,
    UserUpdate,
    UserResponse,
    PublicUserResponse,
    AuthResponse,
)
from booknotes.shared.schemas.book import (
    BookCreate,
    BookUpdate,
    BookSummaryResponse,
    BookResponse,
    LikeResponse,
)
from booknotes.shared.schemas.comment import (
    CommentCreate,
    CommentResponse,
)
from booknotes.shared.schemas.notification import (
    NotificationResponse,
    UnreadCountResponse,
    MarkReadResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserCreate",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "PublicUserResponse",
    "AuthResponse",
    # Book
    "BookCreate",
    "BookUpdate",
    "BookSummaryResponse",
    "BookResponse",
    "LikeResponse",
    # Comment
    "CommentCreate",
    "CommentResponse",
    # Notification
    "NotificationResponse",
    "UnreadCountResponse",
    "MarkReadResponse",
]
