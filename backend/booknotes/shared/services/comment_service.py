"""
Comment Service

Business logic for book comments and replies.

Usage:
======
    from booknotes.shared.services.comment_service import CommentService

    service = CommentService(db)
    roots = await service.list_comments(book_id)
    node = await service.create_comment(book_id, user_id, "Great read", parent_id=None)
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.core.exceptions import (
    BookNotFoundError,
    CommentNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.comment import Comment
from booknotes.shared.models.enums import NotificationType
from booknotes.shared.repositories.book_repository import BookRepository
from booknotes.shared.repositories.comment_repository import CommentRepository
from booknotes.shared.repositories.user_repository import UserRepository
from booknotes.shared.services.comment_tree import CommentEntry, CommentNode, build_comment_tree
from booknotes.shared.services.notification_fanout import NotificationFanout


logger = get_logger(__name__)


def _entry(comment: Comment, author_name: Optional[str], author_avatar: Optional[str]) -> CommentEntry:
    return CommentEntry(
        id=comment.id,
        book_id=comment.book_id,
        user_id=comment.user_id,
        parent_id=comment.parent_id,
        content=comment.content,
        created_at=comment.created_at,
        author_name=author_name or "",
        author_avatar=author_avatar,
    )


class CommentService:
    """
    Service for comment threads.

    Handles:
    - Listing a book's comments as a reply forest
    - Creating root comments and replies, then notifying the addressee
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.books = BookRepository(session)
        self.comments = CommentRepository(session)
        self.users = UserRepository(session)
        self.fanout = NotificationFanout(session)

    async def list_comments(self, book_id: UUID) -> list[CommentNode]:
        """
        Get a book's comments as threads.

        An unknown book has no comments, so this returns an empty list
        rather than raising.
        """
        rows = await self.comments.list_for_book(book_id)
        return build_comment_tree(
            _entry(comment, author_name, author_avatar)
            for comment, author_name, author_avatar in rows
        )

    async def create_comment(
        self,
        book_id: UUID,
        user_id: UUID,
        content: str,
        parent_id: Optional[UUID] = None,
    ) -> CommentNode:
        """
        Create a root comment or a reply.

        All checks run before anything is written. After the comment is
        committed, the parent's author (for replies) or the book's author
        (for root comments) gets a ``reply`` notification.

        Returns:
            The new comment as a childless node

        Raises:
            ValidationError: Empty content, or parent on a different book
            BookNotFoundError: Unknown book
            CommentNotFoundError: Unknown parent comment
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Comment content is required", details={"field": "content"})

        book = await self.books.get(book_id)
        if not book:
            raise BookNotFoundError(str(book_id))
        recipient_id = book.user_id

        if parent_id is not None:
            parent = await self.comments.get(parent_id)
            if not parent:
                raise CommentNotFoundError(str(parent_id))
            if parent.book_id != book_id:
                raise ValidationError(
                    "Parent comment belongs to a different book",
                    details={"field": "parent_id"},
                )
            recipient_id = parent.user_id

        author = await self.users.get(user_id)
        if not author:
            raise UserNotFoundError(str(user_id))

        comment = await self.comments.create(
            book_id=book_id,
            user_id=user_id,
            parent_id=parent_id,
            content=text,
        )
        await self.session.commit()

        # Snapshot before fan-out; a failed fan-out expires loaded objects
        entry = _entry(comment, author.name, author.avatar_url)

        logger.info(
            "Comment created",
            comment_id=str(entry.id),
            book_id=str(book_id),
            user_id=str(user_id),
            is_reply=parent_id is not None,
        )

        await self.fanout.notify(
            recipient_id,
            user_id,
            NotificationType.REPLY,
            book_id=book_id,
            comment_id=entry.id,
        )

        return CommentNode(comment=entry)
