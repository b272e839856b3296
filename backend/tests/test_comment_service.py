"""Tests for creating and listing comment threads."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from booknotes.shared.core.exceptions import BookNotFoundError, CommentNotFoundError, ValidationError
from booknotes.shared.models import Comment, Notification, NotificationType
from booknotes.shared.services.comment_service import CommentService

from conftest import at


async def _notifications(db):
    result = await db.execute(select(Notification))
    return list(result.scalars().all())


async def test_root_comment_notifies_book_author(db, seed):
    author = await seed.user("Author")
    reader = await seed.user("Reader", avatar_url="/uploads/r.png")
    book = await seed.book(author)

    node = await CommentService(db).create_comment(book.id, reader.id, "Great read")

    assert node.comment.parent_id is None
    assert node.comment.author_name == "Reader"
    assert node.comment.author_avatar == "/uploads/r.png"
    assert node.children == []

    (notification,) = await _notifications(db)
    assert notification.user_id == author.id
    assert notification.actor_id == reader.id
    assert notification.type == NotificationType.REPLY
    assert notification.book_id == book.id
    assert notification.comment_id == node.comment.id


async def test_reply_notifies_parent_author_not_book_author(db, seed):
    author = await seed.user("Author")
    ann = await seed.user("Ann")
    ben = await seed.user("Ben")
    book = await seed.book(author)
    parent = await seed.comment(book, ann)

    node = await CommentService(db).create_comment(book.id, ben.id, "Agreed", parent_id=parent.id)

    assert node.comment.parent_id == parent.id
    (notification,) = await _notifications(db)
    assert notification.user_id == ann.id
    assert notification.comment_id == node.comment.id


async def test_reply_to_own_comment_is_silent(db, seed):
    author = await seed.user("Author")
    ann = await seed.user("Ann")
    book = await seed.book(author)
    parent = await seed.comment(book, ann)

    await CommentService(db).create_comment(book.id, ann.id, "Also...", parent_id=parent.id)

    assert await _notifications(db) == []


async def test_author_commenting_on_own_book_is_silent(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author)

    await CommentService(db).create_comment(book.id, author.id, "Errata")

    assert await _notifications(db) == []


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
async def test_blank_content_is_rejected_before_writing(db, seed, content):
    author = await seed.user("Author")
    book = await seed.book(author)

    with pytest.raises(ValidationError):
        await CommentService(db).create_comment(book.id, author.id, content)

    assert await db.scalar(select(func.count()).select_from(Comment)) == 0


async def test_unknown_book_raises(db, seed):
    reader = await seed.user("Reader")

    with pytest.raises(BookNotFoundError):
        await CommentService(db).create_comment(uuid4(), reader.id, "Hello")


async def test_unknown_parent_raises(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author)

    with pytest.raises(CommentNotFoundError):
        await CommentService(db).create_comment(book.id, author.id, "Hi", parent_id=uuid4())


async def test_parent_on_other_book_is_rejected(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author, title="One")
    other = await seed.book(author, title="Two")
    parent = await seed.comment(other, author)

    with pytest.raises(ValidationError):
        await CommentService(db).create_comment(book.id, author.id, "Hi", parent_id=parent.id)

    assert await db.scalar(select(func.count()).select_from(Comment)) == 1


async def test_list_comments_builds_threads(db, seed):
    author = await seed.user("Author")
    ann = await seed.user("Ann")
    book = await seed.book(author)
    c1 = await seed.comment(book, ann, "first", created_at=at(1))
    c2 = await seed.comment(book, author, "reply", parent=c1, created_at=at(2))
    c3 = await seed.comment(book, ann, "second", created_at=at(3))
    c4 = await seed.comment(book, ann, "nested", parent=c2, created_at=at(4))

    roots = await CommentService(db).list_comments(book.id)

    assert [n.comment.id for n in roots] == [c1.id, c3.id]
    assert [n.comment.id for n in roots[0].children] == [c2.id]
    assert [n.comment.id for n in roots[0].children[0].children] == [c4.id]
    assert roots[0].comment.author_name == "Ann"
    assert roots[0].children[0].comment.author_name == "Author"


async def test_list_comments_only_for_that_book(db, seed):
    author = await seed.user("Author")
    book = await seed.book(author, title="One")
    other = await seed.book(author, title="Two")
    await seed.comment(other, author)

    assert await CommentService(db).list_comments(book.id) == []


async def test_list_comments_unknown_book_is_empty(db):
    assert await CommentService(db).list_comments(uuid4()) == []
