"""Base repository with generic CRUD operations."""
from typing import Any, Generic, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)

# Columns a partial update never touches
IMMUTABLE_COLUMNS = frozenset({"id", "user_id", "created_at", "updated_at"})


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model."""

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    def _select(self):
        """Base SELECT for this model; subclasses attach eager loads here."""
        return select(self.model)

    async def get_by_id(self, id: int) -> T | None:
        """Get a single record by ID, reloading it if already in the session."""
        result = await self.db.execute(
            self._select()
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create(self, obj: T) -> T | None:
        """Create a new record and return it freshly loaded."""
        self.db.add(obj)
        await self.db.commit()
        return await self.get_by_id(obj.id)

    async def update(self, id: int, data: dict[str, Any]) -> int:
        """Apply a partial update; returns the number of rows affected."""
        columns = set(self.model.__table__.columns.keys()) - IMMUTABLE_COLUMNS
        values = {key: value for key, value in data.items() if key in columns}
        if not values:
            return 0

        result = await self.db.execute(
            update(self.model).where(self.model.id == id).values(**values)
        )
        await self.db.commit()
        return result.rowcount

    async def rollback(self) -> None:
        """Discard the session's failed transaction so it can be reused."""
        await self.db.rollback()

    async def delete(self, id: int) -> int:
        """Delete a record by ID; returns the number of rows affected."""
        result = await self.db.execute(delete(self.model).where(self.model.id == id))
        await self.db.commit()
        return result.rowcount
