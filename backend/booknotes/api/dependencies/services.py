"""
Service Dependencies

One service instance per request, bound to the request's session.

    @router.post("/{book_id}/like")
    async def toggle_like(book_id: UUID, current_user: CurrentUser,
                          like_service: LikeService = Depends(get_like_service)):
        ...
"""

from booknotes.api.dependencies.database import DbSession
from booknotes.shared.services.auth_service import AuthService
from booknotes.shared.services.book_service import BookService
from booknotes.shared.services.comment_service import CommentService
from booknotes.shared.services.like_service import LikeService
from booknotes.shared.services.notification_service import NotificationService
from booknotes.shared.services.user_service import UserService


async def get_auth_service(db: DbSession) -> AuthService:
    return AuthService(db)


async def get_user_service(db: DbSession) -> UserService:
    return UserService(db)


async def get_book_service(db: DbSession) -> BookService:
    return BookService(db)


async def get_like_service(db: DbSession) -> LikeService:
    return LikeService(db)


async def get_comment_service(db: DbSession) -> CommentService:
    return CommentService(db)


async def get_notification_service(db: DbSession) -> NotificationService:
    return NotificationService(db)
