"""Category service for business logic operations."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import BadRequestError, NotFoundError
from app.models.category import Category
from app.repositories.category import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    """Service layer for category operations."""

    def __init__(self, category_repo: CategoryRepository):
        self.category_repo = category_repo

    async def create(self, title: str, owner_id: int) -> Category:
        """Create a category; titles must be unique per owner.

        Raises:
            BadRequestError: If the owner already has a category with this title
        """
        if await self.category_repo.get_by_title(owner_id, title) is not None:
            raise BadRequestError("CAT_002", details={"title": title})

        try:
            category = await self.category_repo.create(Category(title=title, user_id=owner_id))
        except IntegrityError:
            # A concurrent request created the same title first
            await self.category_repo.rollback()
            raise BadRequestError("CAT_002", details={"title": title}) from None
        logger.info(
            "Category created", extra={"user_id": owner_id, "category_id": category.id}
        )
        return category

    async def find_all(self, owner_id: int) -> list[Category]:
        """All categories owned by owner_id, with their transactions."""
        return await self.category_repo.get_all_by_user(owner_id)

    async def find_one(self, id: int) -> Category:
        """Get a category by ID.

        Raises:
            NotFoundError: If the category does not exist
        """
        category = await self.category_repo.get_by_id(id)
        if category is None:
            raise NotFoundError("CAT_001", details={"category_id": id})
        return category

    async def update(self, id: int, fields: dict[str, Any]) -> dict[str, int]:
        """Apply a partial update and return the affected-count summary.

        Raises:
            NotFoundError: If the category does not exist
            BadRequestError: If the new title is already used by the same owner
        """
        category = await self.find_one(id)

        title = fields.get("title")
        if title is None:
            fields = {key: value for key, value in fields.items() if key != "title"}
        elif title != category.title:
            if await self.category_repo.get_by_title(category.user_id, title) is not None:
                raise BadRequestError("CAT_002", details={"title": title})

        try:
            affected = await self.category_repo.update(id, fields)
        except IntegrityError:
            await self.category_repo.rollback()
            raise BadRequestError("CAT_002", details={"title": title}) from None
        return {"affected": affected}

    async def remove(self, id: int) -> dict[str, int]:
        """Delete a category; its transactions keep existing uncategorized.

        Raises:
            NotFoundError: If the category does not exist
        """
        await self.find_one(id)
        affected = await self.category_repo.delete(id)
        logger.info("Category removed", extra={"category_id": id})
        return {"affected": affected}
