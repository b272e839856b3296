"""
Shared Module

Contains the domain code behind the API:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Security, genre parsing

Usage:
======
    from booknotes.shared.models import User, Book
    from booknotes.shared.repositories import BookRepository
    from booknotes.shared.services import LikeService
    from booknotes.shared.schemas import BookCreate, BookResponse
    from booknotes.shared.core import logger, BooknotesException
"""
