"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ NotificationFanout (after the primary write commits)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: User registration and authentication
- UserService: Profile read, update and deletion
- BookService: Book authoring, search and genres
- LikeService: Like toggle with notification
- CommentService: Comment threads and replies
- NotificationService: Inbox listing and read state
- NotificationFanout: Notification creation for likes and replies

Usage:
======
    from booknotes.shared.services import LikeService

    service = LikeService(db)
    result = await service.toggle_like(book_id, user_id)
"""

from booknotes.shared.services.auth_service import AuthResult, AuthService
from booknotes.shared.services.user_service import UserService
from booknotes.shared.services.book_service import BookDetail, BookService, BookSummary
from booknotes.shared.services.like_service import LikeService, LikeToggleResult
from booknotes.shared.services.comment_tree import CommentEntry, CommentNode, build_comment_tree
from booknotes.shared.services.comment_service import CommentService
from booknotes.shared.services.notification_fanout import (
    FanoutResult,
    FanoutStatus,
    NotificationFanout,
)
from booknotes.shared.services.notification_service import NotificationEntry, NotificationService

__all__ = [
    "AuthService",
    "AuthResult",
    "UserService",
    "BookService",
    "BookSummary",
    "BookDetail",
    "LikeService",
    "LikeToggleResult",
    "CommentService",
    "CommentEntry",
    "CommentNode",
    "build_comment_tree",
    "NotificationFanout",
    "FanoutResult",
    "FanoutStatus",
    "NotificationService",
    "NotificationEntry",
]
