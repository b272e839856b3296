"""
Database Dependency

Request-scoped session for handlers and the other dependencies. FastAPI
caches it per request, so the auth dependency and the services of one
request share a single session. Tests override ``get_db`` to use their own
database.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.db import get_db as _session_scope


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in _session_scope():
        yield session


DbSession = Annotated[AsyncSession, Depends(get_db)]
