"""Shared fixtures: a throwaway SQLite database per test and seed helpers."""

import os
from datetime import datetime, timedelta, timezone
from typing import Optional

os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from booknotes.shared.models import Base, Book, BookLike, Comment, Notification, NotificationType, User
from booknotes.shared.utils.security import SecurityUtils


PASSWORD = "secret123"
PASSWORD_HASH = SecurityUtils.hash_password(PASSWORD)

BASE_TIME = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after BASE_TIME, for deterministic ordering."""
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'booknotes.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record):
        # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs work
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


class Seeder:
    """Writes fixture rows through short-lived sessions that are committed and closed."""

    def __init__(self, session_factory) -> None:
        self.session_factory = session_factory

    async def _save(self, instance):
        async with self.session_factory() as session:
            session.add(instance)
            await session.commit()
        return instance

    async def user(
        self,
        name: str = "Reader",
        email: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        email = email or f"{name.lower().replace(' ', '.')}@example.com"
        return await self._save(
            User(
                name=name,
                email=email,
                avatar_url=avatar_url,
                password_hash=PASSWORD_HASH,
            )
        )

    async def book(
        self,
        author: User,
        title: str = "Atomic Habits",
        genres: Optional[list[str]] = None,
        created_at: Optional[datetime] = None,
        content: str = "Small habits compound.",
    ) -> Book:
        book = Book(
            user_id=author.id,
            title=title,
            content=content,
            genres=genres or [],
        )
        if created_at is not None:
            book.created_at = created_at
        return await self._save(book)

    async def like(self, book: Book, user: User) -> BookLike:
        return await self._save(BookLike(book_id=book.id, user_id=user.id))

    async def comment(
        self,
        book: Book,
        author: User,
        content: str = "Nice summary",
        parent: Optional[Comment] = None,
        created_at: Optional[datetime] = None,
    ) -> Comment:
        comment = Comment(
            book_id=book.id,
            user_id=author.id,
            parent_id=parent.id if parent else None,
            content=content,
        )
        if created_at is not None:
            comment.created_at = created_at
        return await self._save(comment)

    async def notification(
        self,
        recipient: User,
        actor: User,
        kind: NotificationType = NotificationType.LIKE,
        book: Optional[Book] = None,
        comment: Optional[Comment] = None,
        is_read: bool = False,
        created_at: Optional[datetime] = None,
    ) -> Notification:
        notification = Notification(
            user_id=recipient.id,
            actor_id=actor.id,
            type=kind,
            book_id=book.id if book else None,
            comment_id=comment.id if comment else None,
            is_read=is_read,
        )
        if created_at is not None:
            notification.created_at = created_at
        return await self._save(notification)


@pytest.fixture
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)
