"""Tests for book authoring, search and genres."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from booknotes.shared.core.exceptions import AuthorizationError, BookNotFoundError, ValidationError
from booknotes.shared.models import Book, BookLike, Comment, Notification, NotificationType
from booknotes.shared.services.book_service import BookService

from conftest import at


# ═══════════════════════════════════════════════════════════════════════════════
# SEARCH
# ═══════════════════════════════════════════════════════════════════════════════


async def test_search_without_filters_returns_newest_first(db, seed):
    author = await seed.user("Author")
    old = await seed.book(author, title="Old", created_at=at(1))
    new = await seed.book(author, title="New", created_at=at(2))

    results = await BookService(db).search_books()

    assert [r.id for r in results] == [new.id, old.id]


async def test_search_matches_title_case_insensitively(db, seed):
    author = await seed.user("Author")
    atomic = await seed.book(author, title="Atomic Habits")
    await seed.book(author, title="Deep Work")

    results = await BookService(db).search_books(search="HABIT")

    assert [r.id for r in results] == [atomic.id]


async def test_search_matches_any_genre_substring(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author, title="Sapiens", genres=["History", "Anthropology"])
    await seed.book(author, title="Dune", genres=["sci-fi"])

    results = await BookService(db).search_books(search="anthro")

    assert [r.id for r in results] == [book.id]


async def test_search_treats_wildcards_literally(db, seed):
    author = await seed.user("Author")
    percent = await seed.book(author, title="100% Effort")
    await seed.book(author, title="1000 Effort")

    results = await BookService(db).search_books(search="0%")

    assert [r.id for r in results] == [percent.id]


async def test_search_underscore_is_not_a_wildcard(db, seed):
    author = await seed.user("Author")
    await seed.book(author, title="snakecase")
    snake = await seed.book(author, title="snake_case")

    results = await BookService(db).search_books(search="e_c")

    assert [r.id for r in results] == [snake.id]


async def test_genre_filter_is_exact_and_case_insensitive(db, seed):
    author = await seed.user("Author")
    design = await seed.book(author, title="Design", genres=["atomic-design"], created_at=at(1))
    await seed.book(author, title="Physics", genres=["atomic"], created_at=at(2))

    results = await BookService(db).search_books(genre="ATOMIC-DESIGN")

    assert [r.id for r in results] == [design.id]


async def test_search_and_genre_combine(db, seed):
    author = await seed.user("Author")
    match = await seed.book(author, title="Dune", genres=["sci-fi"])
    await seed.book(author, title="Dune Messiah", genres=["fantasy"])
    await seed.book(author, title="Foundation", genres=["sci-fi"])

    results = await BookService(db).search_books(search="dune", genre="Sci-Fi")

    assert [r.id for r in results] == [match.id]


async def test_search_summaries_carry_author_and_counts(db, seed):
    author = await seed.user("Author")
    ann = await seed.user("Ann")
    ben = await seed.user("Ben")
    book = await seed.book(author, genres=["self-help"])
    quiet = await seed.book(author, title="Quiet")
    await seed.like(book, ann)
    await seed.like(book, ben)
    await seed.comment(book, ann)

    results = {r.id: r for r in await BookService(db).search_books()}

    assert results[book.id].author_name == "Author"
    assert results[book.id].author_id == author.id
    assert results[book.id].genres == ["self-help"]
    assert results[book.id].like_count == 2
    assert results[book.id].comment_count == 1
    assert results[quiet.id].like_count == 0
    assert results[quiet.id].comment_count == 0


async def test_search_is_capped_at_one_hundred(db, seed):
    author = await seed.user("Author")
    for i in range(105):
        await seed.book(author, title=f"Book {i}", created_at=at(i))

    results = await BookService(db).search_books()

    assert len(results) == 100
    assert results[0].title == "Book 104"


# ═══════════════════════════════════════════════════════════════════════════════
# GENRES
# ═══════════════════════════════════════════════════════════════════════════════


async def test_list_genres_is_sorted_and_distinct(db, seed):
    author = await seed.user("Author")
    await seed.book(author, genres=["psychology", "self-help"])
    await seed.book(author, genres=["history", "psychology"])
    await seed.book(author, genres=[])

    assert await BookService(db).list_genres() == ["history", "psychology", "self-help"]


async def test_list_genres_empty_catalogue(db):
    assert await BookService(db).list_genres() == []


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHORING
# ═══════════════════════════════════════════════════════════════════════════════


async def test_create_book_normalizes_fields(db, seed):
    author = await seed.user("Author")

    detail = await BookService(db).create_book(
        author.id,
        title="  Atomic Habits ",
        content=" Small habits. ",
        genres="self-help,\npsychology, ",
        source_url="",
    )

    assert detail.title == "Atomic Habits"
    assert detail.content == "Small habits."
    assert detail.genres == ["self-help", "psychology"]
    assert detail.source_url is None
    assert detail.user_id == author.id
    assert detail.author_name == "Author"


@pytest.mark.parametrize(("title", "content"), [("   ", "body"), ("Title", "")])
async def test_create_book_requires_title_and_content(db, seed, title, content):
    author = await seed.user("Author")

    with pytest.raises(ValidationError):
        await BookService(db).create_book(author.id, title=title, content=content)


async def test_get_book_unknown_raises(db):
    with pytest.raises(BookNotFoundError):
        await BookService(db).get_book(uuid4())


async def test_update_book_is_partial(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author, title="Draft", genres=["a"], content="Body")

    detail = await BookService(db).update_book(book.id, author.id, title="Final", genres=["b", "c"])

    assert detail.title == "Final"
    assert detail.genres == ["b", "c"]
    assert detail.content == "Body"


async def test_update_book_by_non_author_is_forbidden(db, seed):
    author = await seed.user("Author")
    intruder = await seed.user("Intruder")
    book = await seed.book(author, title="Mine")

    with pytest.raises(AuthorizationError):
        await BookService(db).update_book(book.id, intruder.id, title="Theirs")

    assert (await BookService(db).get_book(book.id)).title == "Mine"


async def test_update_book_rejects_blank_title(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author)

    with pytest.raises(ValidationError):
        await BookService(db).update_book(book.id, author.id, title="  ")


async def test_update_unknown_book_raises(db, seed):
    author = await seed.user("Author")

    with pytest.raises(BookNotFoundError):
        await BookService(db).update_book(uuid4(), author.id, title="X")


async def test_delete_book_cascades(db, seed):
    author = await seed.user("Author")
    ann = await seed.user("Ann")
    book = await seed.book(author)
    await seed.like(book, ann)
    comment = await seed.comment(book, ann)
    await seed.comment(book, author, parent=comment)
    await seed.notification(author, ann, NotificationType.REPLY, book=book, comment=comment)

    await BookService(db).delete_book(book.id, author.id)
    await db.commit()

    for model in (Book, BookLike, Comment, Notification):
        assert await db.scalar(select(func.count()).select_from(model)) == 0


async def test_delete_book_by_non_author_is_forbidden(db, seed):
    author = await seed.user("Author")
    intruder = await seed.user("Intruder")
    book = await seed.book(author)

    with pytest.raises(AuthorizationError):
        await BookService(db).delete_book(book.id, intruder.id)
