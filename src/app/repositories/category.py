"""Category repository with user-scoped queries."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.category import Category
from app.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model; categories always carry their transactions."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    def _select(self):
        return select(Category).options(selectinload(Category.transactions))

    async def get_by_title(self, user_id: int, title: str) -> Category | None:
        """Find a user's category by its exact title."""
        result = await self.db.execute(
            select(Category).where(Category.user_id == user_id, Category.title == title)
        )
        return result.scalar_one_or_none()

    async def get_all_by_user(self, user_id: int) -> list[Category]:
        """Get all categories for a user, with transactions attached."""
        result = await self.db.execute(
            self._select()
            .where(Category.user_id == user_id)
            .order_by(Category.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_owner_id(self, category_id: int) -> int | None:
        """Return the owning user id of a category, or None if it doesn't exist."""
        result = await self.db.execute(
            select(Category.user_id).where(Category.id == category_id)
        )
        return result.scalar_one_or_none()
