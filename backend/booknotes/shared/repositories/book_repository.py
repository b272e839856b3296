"""
Book Repository

Database operations for book summaries: enriched search, single-book lookup
with the author's name, and the distinct genre list.

Genres are stored as a JSON array. Matching against individual elements uses
the dialect's table-valued JSON function:
    - PostgreSQL: jsonb_array_elements_text(books.genres)
    - SQLite:     json_each(books.genres)
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import Row, func, or_, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.repositories.base import BaseRepository
from booknotes.shared.models.book import Book
from booknotes.shared.models.book_like import BookLike
from booknotes.shared.models.comment import Comment
from booknotes.shared.models.user import User


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Book, session)

    def _genre_elements(self) -> Any:
        """Table-valued expression yielding one ``value`` row per genre of the current book."""
        if self.session.get_bind().dialect.name == "postgresql":
            return func.jsonb_array_elements_text(Book.genres).table_valued("value")
        return func.json_each(Book.genres).table_valued("value")

    async def get_with_author(self, book_id: UUID) -> Optional[Row]:
        """
        Get a book together with its author's display name.

        Returns:
            Row of (Book, author_name), or None if the book does not exist
        """
        stmt = (
            select(Book, User.name.label("author_name"))
            .join(User, User.id == Book.user_id)
            .where(Book.id == book_id)
        )
        result = await self.session.execute(stmt)
        return result.first()

    async def search(
        self,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        limit: int = 100,
    ) -> list[Row]:
        """
        Search books, newest first.

        Args:
            search: Case-insensitive substring matched against the title or
                any genre. LIKE wildcards in the term are matched literally.
            genre: Case-insensitive exact match against any genre
            limit: Maximum rows to return

        Returns:
            Rows of (Book, author_name, like_count, comment_count)

        SQL Generated (PostgreSQL, both filters):
            SELECT books.*, users.name,
                   (SELECT count(*) FROM book_likes WHERE book_id = books.id),
                   (SELECT count(*) FROM comments WHERE book_id = books.id)
            FROM books JOIN users ON users.id = books.user_id
            WHERE (lower(books.title) LIKE '%' || lower(:term) || '%'
                   OR EXISTS (SELECT value FROM jsonb_array_elements_text(books.genres)
                              WHERE lower(value) LIKE ...))
              AND EXISTS (SELECT value FROM jsonb_array_elements_text(books.genres)
                          WHERE lower(value) = :genre)
            ORDER BY books.created_at DESC, books.id DESC
            LIMIT 100
        """
        like_count = (
            select(func.count())
            .select_from(BookLike)
            .where(BookLike.book_id == Book.id)
            .correlate(Book)
            .scalar_subquery()
        )
        comment_count = (
            select(func.count())
            .select_from(Comment)
            .where(Comment.book_id == Book.id)
            .correlate(Book)
            .scalar_subquery()
        )

        stmt = select(
            Book,
            User.name.label("author_name"),
            like_count.label("like_count"),
            comment_count.label("comment_count"),
        ).join(User, User.id == Book.user_id)

        if search:
            elements = self._genre_elements()
            genre_hit = (
                select(elements.c.value)
                .where(elements.c.value.icontains(search, autoescape=True))
                .exists()
            )
            stmt = stmt.where(or_(Book.title.icontains(search, autoescape=True), genre_hit))

        if genre:
            elements = self._genre_elements()
            stmt = stmt.where(
                select(elements.c.value)
                .where(func.lower(elements.c.value) == genre.lower())
                .exists()
            )

        stmt = stmt.order_by(Book.created_at.desc(), Book.id.desc()).limit(limit)

        result = await self.session.execute(stmt)
        return list(result.all())

    async def distinct_genres(self) -> list[str]:
        """Every distinct non-empty genre across all books, sorted ascending."""
        elements = self._genre_elements()
        stmt = (
            select(elements.c.value)
            .select_from(Book)
            .join(elements, true())
            .where(elements.c.value != "")
            .distinct()
            .order_by(elements.c.value)
        )
        result = await self.session.execute(stmt)
        return [str(value) for value in result.scalars().all()]
