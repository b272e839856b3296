"""
Book Service

Business logic for book summaries: authoring, the public search listing and
the genre catalogue.

Ownership Rules:
================
- Anyone may read and search.
- Only the author may update or delete a book.
- The author of a book never changes.

Usage:
======
    from booknotes.shared.services.book_service import BookService

    service = BookService(db)
    books = await service.search_books(search="habit")
    detail = await service.create_book(user_id, "Atomic Habits", "...", genres="self-help, psychology")
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.config.settings import settings
from booknotes.shared.core.exceptions import AuthorizationError, BookNotFoundError, ValidationError
from booknotes.shared.core.logging import get_logger
from booknotes.shared.models.book import Book
from booknotes.shared.repositories.book_repository import BookRepository
from booknotes.shared.utils.genres import parse_genres


logger = get_logger(__name__)


@dataclass
class BookSummary:
    """One row of the search listing."""

    id: UUID
    title: str
    cover_url: Optional[str]
    genres: list[str]
    source_url: Optional[str]
    created_at: datetime
    author_id: UUID
    author_name: str
    like_count: int = 0
    comment_count: int = 0


@dataclass
class BookDetail:
    """A full book with its author's display name."""

    id: UUID
    user_id: UUID
    title: str
    content: str
    genres: list[str]
    cover_url: Optional[str]
    source_url: Optional[str]
    created_at: datetime
    author_name: str

    @classmethod
    def from_book(cls, book: Book, author_name: Optional[str]) -> "BookDetail":
        return cls(
            id=book.id,
            user_id=book.user_id,
            title=book.title,
            content=book.content,
            genres=list(book.genres or []),
            cover_url=book.cover_url,
            source_url=book.source_url,
            created_at=book.created_at,
            author_name=author_name or "",
        )


def _required_text(value: Optional[str], field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field.capitalize()} is required", details={"field": field})
    return text


class BookService:
    """
    Service for book summaries.

    Attributes:
        session: Database session
        repo: BookRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = BookRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # QUERIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def search_books(self, search: str = "", genre: str = "") -> list[BookSummary]:
        """
        Search the catalogue, newest first.

        Args:
            search: Case-insensitive substring of the title or any genre.
                Empty matches everything.
            genre: Case-insensitive exact genre. Empty matches everything.

        Returns:
            At most settings.BOOK_SEARCH_LIMIT summaries with author name and
            like/comment counts
        """
        rows = await self.repo.search(
            search=(search or "").strip() or None,
            genre=(genre or "").strip() or None,
            limit=settings.BOOK_SEARCH_LIMIT,
        )
        return [
            BookSummary(
                id=book.id,
                title=book.title,
                cover_url=book.cover_url,
                genres=list(book.genres or []),
                source_url=book.source_url,
                created_at=book.created_at,
                author_id=book.user_id,
                author_name=author_name or "",
                like_count=like_count or 0,
                comment_count=comment_count or 0,
            )
            for book, author_name, like_count, comment_count in rows
        ]

    async def get_book(self, book_id: UUID) -> BookDetail:
        """
        Get one book with its author's name.

        Raises:
            BookNotFoundError: If the book does not exist
        """
        row = await self.repo.get_with_author(book_id)
        if row is None:
            raise BookNotFoundError(str(book_id))
        book, author_name = row
        return BookDetail.from_book(book, author_name)

    async def list_genres(self) -> list[str]:
        """Sorted distinct genres across all books."""
        return await self.repo.distinct_genres()

    # ═══════════════════════════════════════════════════════════════════════════
    # COMMANDS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_book(
        self,
        user_id: UUID,
        title: str,
        content: str,
        genres: Any = None,
        cover_url: Optional[str] = None,
        source_url: Optional[str] = None,
    ) -> BookDetail:
        """
        Create a book authored by ``user_id``.

        Raises:
            ValidationError: Empty title or content, or malformed genres
        """
        book = await self.repo.create(
            user_id=user_id,
            title=_required_text(title, "title"),
            content=_required_text(content, "content"),
            genres=parse_genres(genres),
            cover_url=cover_url or None,
            source_url=source_url or None,
        )
        logger.info("Book created", book_id=str(book.id), user_id=str(user_id))
        return await self.get_book(book.id)

    async def update_book(
        self,
        book_id: UUID,
        user_id: UUID,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        genres: Any = None,
        cover_url: Optional[str] = None,
        source_url: Optional[str] = None,
    ) -> BookDetail:
        """
        Partially update a book. Arguments left as None keep their value.

        Raises:
            BookNotFoundError: If the book does not exist
            AuthorizationError: If the caller is not the author
            ValidationError: Title or content given but empty
        """
        await self._get_owned(book_id, user_id)

        await self.repo.update(
            book_id,
            title=_required_text(title, "title") if title is not None else None,
            content=_required_text(content, "content") if content is not None else None,
            genres=parse_genres(genres) if genres is not None else None,
            cover_url=cover_url,
            source_url=source_url,
        )
        logger.info("Book updated", book_id=str(book_id), user_id=str(user_id))
        return await self.get_book(book_id)

    async def delete_book(self, book_id: UUID, user_id: UUID) -> None:
        """
        Delete a book with its likes, comments and notifications.

        Raises:
            BookNotFoundError: If the book does not exist
            AuthorizationError: If the caller is not the author
        """
        await self._get_owned(book_id, user_id)
        await self.repo.delete(book_id)
        logger.info("Book deleted", book_id=str(book_id), user_id=str(user_id))

    async def _get_owned(self, book_id: UUID, user_id: UUID) -> Book:
        book = await self.repo.get(book_id)
        if not book:
            raise BookNotFoundError(str(book_id))
        if book.user_id != user_id:
            raise AuthorizationError("Only the author can modify this book")
        return book
