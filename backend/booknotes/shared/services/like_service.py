"""
Like Service

Flips a user's like on a book and reports the resulting count.

State machine for one (book, user) pair:

    NOT_LIKED ──toggle──▶ LIKED      (row inserted, author notified)
    LIKED     ──toggle──▶ NOT_LIKED  (row deleted, nobody notified)

Two concurrent "like" toggles for the same pair race on the book_likes
primary key. The loser's insert fails with an IntegrityError inside its
savepoint and is reported as liked without a second notification.
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.core.exceptions import BookNotFoundError
from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.enums import NotificationType
from booknotes.shared.repositories.book_repository import BookRepository
from booknotes.shared.repositories.like_repository import LikeRepository
from booknotes.shared.services.notification_fanout import NotificationFanout


logger = get_logger(__name__)


@dataclass(frozen=True)
class LikeToggleResult:
    """State of the pair after a toggle."""

    liked: bool
    like_count: int


class LikeService:
    """
    Service for liking and unliking books.

    Attributes:
        session: Database session
        books: BookRepository instance
        likes: LikeRepository instance
        fanout: NotificationFanout sharing the same session
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.books = BookRepository(session)
        self.likes = LikeRepository(session)
        self.fanout = NotificationFanout(session)

    async def toggle_like(self, book_id: UUID, user_id: UUID) -> LikeToggleResult:
        """
        Toggle the user's like on a book.

        Args:
            book_id: Book to like or unlike
            user_id: Acting user

        Returns:
            LikeToggleResult with the new state and the recomputed like count

        Raises:
            BookNotFoundError: If the book does not exist
        """
        book = await self.books.get(book_id)
        if not book:
            raise BookNotFoundError(str(book_id))
        author_id = book.user_id

        if await self.likes.exists_for(book_id, user_id):
            await self.likes.remove(book_id, user_id)
            await self.session.commit()
            logger.info("Book unliked", book_id=str(book_id), user_id=str(user_id))
            liked = False

        else:
            inserted = await self.likes.add(book_id, user_id)
            await self.session.commit()
            liked = True

            if inserted:
                logger.info("Book liked", book_id=str(book_id), user_id=str(user_id))
                await self.fanout.notify(
                    author_id,
                    user_id,
                    NotificationType.LIKE,
                    book_id=book_id,
                )
            else:
                logger.info(
                    "Concurrent like absorbed",
                    book_id=str(book_id),
                    user_id=str(user_id),
                )

        like_count = await self.likes.count_for_book(book_id)
        return LikeToggleResult(liked=liked, like_count=like_count)
