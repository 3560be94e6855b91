"""Category management endpoints.

Single-category routes are addressed as `/{resource_type}/{resource_id}` and
go through the ownership check before the handler runs.
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_category_service, get_current_user, require_owner
from app.models.user import User
from app.schemas.category import (
    CategoryCreate,
    CategoryDetailResponse,
    CategoryResponse,
    CategoryUpdate,
)
from app.schemas.common import AffectedResult
from app.services.category import CategoryService
from app.services.ownership import ResourceType

router = APIRouter(prefix="/categories", tags=["categories"])

OWNERSHIP_RESPONSES = {
    400: {"description": "Entity not found or not owned by the caller"},
    404: {"description": "Unsupported resource type"},
}


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={400: {"description": "Category with this title already exists"}},
)
async def create_category(
    data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = await category_service.create(data.title, current_user.id)
    return CategoryResponse.model_validate(category)


@router.get(
    "",
    response_model=list[CategoryDetailResponse],
    summary="List user's categories",
    description="All categories of the authenticated user, each with its transactions.",
)
async def list_categories(
    current_user: User = Depends(get_current_user),
    category_service: CategoryService = Depends(get_category_service),
) -> list[CategoryDetailResponse]:
    categories = await category_service.find_all(current_user.id)
    return [CategoryDetailResponse.model_validate(category) for category in categories]


@router.get(
    "/{resource_type}/{resource_id}",
    response_model=CategoryDetailResponse,
    summary="Get category",
    responses=OWNERSHIP_RESPONSES,
)
async def get_category(
    resource_id: int,
    _owner: User = Depends(require_owner(ResourceType.CATEGORY)),
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryDetailResponse:
    category = await category_service.find_one(resource_id)
    return CategoryDetailResponse.model_validate(category)


@router.patch(
    "/{resource_type}/{resource_id}",
    response_model=AffectedResult,
    summary="Update category",
    responses=OWNERSHIP_RESPONSES,
)
async def update_category(
    resource_id: int,
    data: CategoryUpdate,
    _owner: User = Depends(require_owner(ResourceType.CATEGORY)),
    category_service: CategoryService = Depends(get_category_service),
) -> AffectedResult:
    result = await category_service.update(resource_id, data.model_dump(exclude_unset=True))
    return AffectedResult(**result)


@router.delete(
    "/{resource_type}/{resource_id}",
    response_model=AffectedResult,
    summary="Delete category",
    description="Transactions in the category are kept and become uncategorized.",
    responses=OWNERSHIP_RESPONSES,
)
async def delete_category(
    resource_id: int,
    _owner: User = Depends(require_owner(ResourceType.CATEGORY)),
    category_service: CategoryService = Depends(get_category_service),
) -> AffectedResult:
    result = await category_service.remove(resource_id)
    return AffectedResult(**result)
