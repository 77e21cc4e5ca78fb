"""
Generic CRUD helpers for the knowledge store collections.

Entities are write-once, so the helpers cover insert, lookup, listing
and bulk deletion only. Every helper runs inside the caller's session;
transaction boundaries belong to KnowledgeStore.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowledge_assistant.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """Collection operations shared by every string-keyed model."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def _listing(self) -> Select:
        """Base SELECT for get_all; subclasses add their ordering."""
        return select(self.model)

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Stage a new row and flush it so key collisions surface immediately.

        Raises:
            IntegrityError: A row with the same primary key exists
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        return instance

    async def get_by_id(self, session: AsyncSession, id: str) -> ModelT | None:
        return await session.get(self.model, id)

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        """List rows in the collection's natural order."""
        return (await session.scalars(self._listing())).all()

    async def count(self, session: AsyncSession) -> int:
        return await session.scalar(select(func.count()).select_from(self.model)) or 0

    async def delete_all(self, session: AsyncSession) -> int:
        """Remove every row. Returns the number removed."""
        result = await session.execute(delete(self.model))
        return result.rowcount or 0
