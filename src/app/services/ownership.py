"""Ownership checks for routes that act on a single transaction or category.

The caller may only read or mutate records whose ``user_id`` is their own.
A missing record and a record owned by someone else are both reported as
400 so the response does not reveal which ids exist.
"""

import logging
from enum import Enum

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.base import MAX_ID
from app.repositories.base import BaseRepository
from app.repositories.category import CategoryRepository
from app.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    """Resource kinds that carry an owning user."""

    TRANSACTION = "transaction"
    CATEGORY = "category"

    @classmethod
    def parse(cls, tag: str) -> "ResourceType":
        """Parse a route tag.

        Raises:
            NotFoundError: If the tag names no known resource type
        """
        try:
            return cls(tag)
        except ValueError:
            raise NotFoundError("OWN_001", details={"resource_type": tag}) from None


class OwnershipGuard:
    """Decides whether a caller may act on a given resource."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        category_repo: CategoryRepository,
    ):
        self.repositories: dict[ResourceType, BaseRepository] = {
            ResourceType.TRANSACTION: transaction_repo,
            ResourceType.CATEGORY: category_repo,
        }

    async def check(self, caller_id: int, resource_type: str, resource_id: str) -> bool:
        """Allow the request only if caller_id owns the resource.

        Args:
            caller_id: Authenticated user id
            resource_type: "transaction" or "category"
            resource_id: Numeric id as received in the route

        Returns:
            True when the caller is the owner

        Raises:
            NotFoundError: Unsupported resource type
            BadRequestError: Entity missing, or owned by another user
        """
        kind = ResourceType.parse(resource_type)

        entity = None
        try:
            entity_id = int(resource_id)
        except (TypeError, ValueError):
            entity_id = None
        if entity_id is not None and 0 < entity_id <= MAX_ID:
            entity = await self.repositories[kind].get_by_id(entity_id)

        if entity is None:
            raise BadRequestError(
                "OWN_002", details={"resource_type": kind.value, "resource_id": resource_id}
            )

        if entity.user_id != caller_id:
            logger.warning(
                "Ownership check denied",
                extra={"user_id": caller_id, "resource_type": kind.value},
            )
            raise BadRequestError(
                "OWN_003", details={"resource_type": kind.value, "resource_id": entity_id}
            )

        return True
