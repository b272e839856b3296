"""
Base Repository

Generic persistence helpers shared by the entity repositories.

Operations:
===========
- get(id)      → One row by primary key, or None
- create(**)   → INSERT, flushed so ids and server defaults are loaded
- update(id)   → Partial update; None arguments leave the column alone
- delete(id)   → DELETE; child rows go with it via ON DELETE CASCADE

Typing:
=======
    class CommentRepository(BaseRepository[Comment]):
        ...

    comment = await CommentRepository(db).get(comment_id)   # Optional[Comment]

Transactions:
=============
Repositories flush, they never commit. The request's get_db() dependency
commits at the end of a request; LikeService and CommentService commit
their primary write themselves so that notification fan-out runs against
an already durable row.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from booknotes.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    CRUD for a single model keyed by an ``id`` column.

    Attributes:
        model: Mapped class handled by this repository
        session: Request-scoped async session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Fetch one row by id.

        SQL Generated:
            SELECT * FROM comments WHERE comments.id = :id
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def create(self, **values: Any) -> ModelType:
        """
        Insert a row and return it with generated values loaded.

        The row is flushed, not committed: a later rollback discards it.
        """
        instance = self.model(**values)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def update(self, record_id: UUID, **changes: Any) -> Optional[ModelType]:
        """
        Apply a partial update.

        Args:
            record_id: Row to change
            **changes: Column values; entries that are None are skipped

        Returns:
            The refreshed row, or None if no row has that id
        """
        instance = await self.get(record_id)
        if instance is None:
            return None

        for column, value in changes.items():
            if value is not None and hasattr(instance, column):
                setattr(instance, column, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a row by id.

        Returns:
            False if there was nothing to delete
        """
        instance = await self.get(record_id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
