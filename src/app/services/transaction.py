"""Transaction service for business logic operations."""

import logging
from typing import Any

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.transaction import Transaction
from app.repositories.category import CategoryRepository
from app.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by a partial update
_NON_NULLABLE = ("title", "amount")


class TransactionService:
    """Service layer for transaction operations."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        category_repo: CategoryRepository,
    ):
        """Initialize transaction service.

        Args:
            transaction_repo: Transaction repository
            category_repo: Category repository, used to validate category links
        """
        self.transaction_repo = transaction_repo
        self.category_repo = category_repo

    async def _check_category(self, category_id: int | None, owner_id: int) -> None:
        if category_id is None:
            return
        if await self.category_repo.get_owner_id(category_id) != owner_id:
            raise BadRequestError(
                "TXN_003", details={"category_id": category_id, "user_id": owner_id}
            )

    async def create(self, fields: dict[str, Any], owner_id: int) -> Transaction:
        """Create a transaction owned by owner_id.

        Args:
            fields: title, amount, and optionally type and category_id
            owner_id: Authenticated caller

        Returns:
            The persisted transaction with its category loaded

        Raises:
            BadRequestError: If the category isn't the owner's, or nothing was persisted
        """
        category_id = fields.get("category_id")
        await self._check_category(category_id, owner_id)

        transaction = Transaction(
            title=fields["title"],
            amount=fields["amount"],
            type=fields.get("type"),
            category_id=category_id,
            user_id=owner_id,
        )
        created = await self.transaction_repo.create(transaction)
        if not created:
            raise BadRequestError("TXN_002", details={"user_id": owner_id})

        logger.info(
            "Transaction created",
            extra={"user_id": owner_id, "transaction_id": created.id},
        )
        return created

    async def find_all(self, owner_id: int) -> list[Transaction]:
        """All of the owner's transactions, newest first."""
        return await self.transaction_repo.get_by_user(owner_id)

    async def find_all_with_pagination(
        self, owner_id: int, page: int, limit: int
    ) -> list[Transaction]:
        """One page of the owner's transactions, newest first.

        Args:
            owner_id: Authenticated caller
            page: Page number (1-indexed)
            limit: Page size
        """
        return await self.transaction_repo.get_page_by_user(
            owner_id, skip=(page - 1) * limit, limit=limit
        )

    async def find_all_by_type(self, owner_id: int, type: str) -> int:
        """Total amount of the owner's transactions tagged with `type`."""
        return await self.transaction_repo.sum_amount_by_type(owner_id, type)

    async def find_one(self, id: int) -> Transaction:
        """Get a transaction by ID.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        transaction = await self.transaction_repo.get_by_id(id)
        if transaction is None:
            raise NotFoundError("TXN_001", details={"transaction_id": id})
        return transaction

    async def update(self, id: int, fields: dict[str, Any]) -> dict[str, int]:
        """Apply a partial update and return the affected-count summary.

        Raises:
            NotFoundError: If the transaction does not exist
            BadRequestError: If the new category isn't the owner's
        """
        transaction = await self.find_one(id)

        fields = {
            key: value
            for key, value in fields.items()
            if not (key in _NON_NULLABLE and value is None)
        }
        if "category_id" in fields:
            await self._check_category(fields["category_id"], transaction.user_id)

        affected = await self.transaction_repo.update(id, fields)
        return {"affected": affected}

    async def remove(self, id: int) -> dict[str, int]:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist
        """
        await self.find_one(id)
        affected = await self.transaction_repo.delete(id)
        logger.info("Transaction removed", extra={"transaction_id": id})
        return {"affected": affected}
