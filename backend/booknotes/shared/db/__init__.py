"""
Database Module

This module provides database connectivity and session management for Booknotes.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to services, which build their repositories
        ▼
    Repositories (User, Book, BookLike, Comment, Notification)
        │  SQL Queries
        ▼
    PostgreSQL Database

Components:
===========
- session.py: Database engine, session factory, and lifecycle functions
"""

from booknotes.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
