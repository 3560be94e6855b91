"""Transaction repository with filtering, pagination and aggregation queries."""
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.transaction import Transaction
from app.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction model with listing and analytics queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    def _select(self):
        return select(Transaction).options(selectinload(Transaction.category))

    def _newest_first(self, user_id: int):
        return (
            self._select()
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .execution_options(populate_existing=True)
        )

    async def get_by_user(self, user_id: int) -> list[Transaction]:
        """Get all transactions for a user, newest first."""
        result = await self.db.execute(self._newest_first(user_id))
        return list(result.scalars().all())

    async def get_page_by_user(
        self, user_id: int, skip: int = 0, limit: int = 10
    ) -> list[Transaction]:
        """Get one page of a user's transactions with category and owner loaded."""
        result = await self.db.execute(
            self._newest_first(user_id)
            .options(selectinload(Transaction.user))
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def sum_amount_by_type(self, user_id: int, type: str) -> int:
        """Sum of amounts over a user's transactions tagged with `type`."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(Transaction.amount), 0)).where(
                Transaction.user_id == user_id, Transaction.type == type
            )
        )
        return int(result.scalar_one())
