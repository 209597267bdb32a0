"""Base repository with generic CRUD operations."""
from typing import Any, Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from remarkbook.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model.

    Every write commits immediately; there are no multi-step transactions.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID, regardless of owner."""
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, obj: T) -> T:
        """Insert a new record."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: T, data: dict[str, Any]) -> T:
        """Apply ``data`` to an already loaded record and persist it."""
        for key, value in data.items():
            if hasattr(obj, key):
                setattr(obj, key, value)
        return await self.save(obj)

    async def save(self, obj: T) -> T:
        """Persist pending changes on a loaded record."""
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: T) -> None:
        """Permanently delete a loaded record."""
        await self.db.delete(obj)
        await self.db.commit()

    async def rollback(self) -> None:
        """Discard uncommitted changes in the current session."""
        await self.db.rollback()
