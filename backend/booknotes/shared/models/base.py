"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models in Booknotes.
It includes the declarative base and the creation timestamp mixin.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── CreatedAtMixin   ← created_at set on INSERT

Usage:
======
    from booknotes.shared.models.base import Base, CreatedAtMixin

    class Book(Base, CreatedAtMixin):
        __tablename__ = "books"
        id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Maps Python ``list[str]`` annotations to JSON, stored as JSONB on PostgreSQL.
    Genre lists are the only such column today.
    """

    type_annotation_map = {
        list[str]: JSON().with_variant(JSONB(), "postgresql"),
        dict[str, Any]: JSON().with_variant(JSONB(), "postgresql"),
    }


class CreatedAtMixin:
    """
    Mixin that adds a creation timestamp to models.

    Lists of books, comments and notifications are ordered by this column, with
    the primary key as tie-breaker. The value is assigned in Python at flush time
    so rows created within the same database second still sort in insertion order;
    the server default covers rows inserted outside the ORM.

    Example values:
        created_at: 2024-01-15T10:30:00.123456Z
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )
