"""Transaction endpoints: create, list, paginate, totals by type.

Single-transaction routes are addressed as `/{resource_type}/{resource_id}`
and go through the ownership check before the handler runs.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_current_user, get_transaction_service, require_owner
from app.config import settings
from app.models.base import MAX_BIGINT
from app.models.user import User
from app.schemas.common import AffectedResult
from app.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
    TransactionWithUserResponse,
    TypeTotal,
)
from app.services.ownership import ResourceType
from app.services.transaction import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])

# Keeps the row offset (page - 1) * limit within a BIGINT
MAX_PAGE = MAX_BIGINT // settings.pagination_max_limit

OWNERSHIP_RESPONSES = {
    400: {"description": "Entity not found or not owned by the caller"},
    404: {"description": "Unsupported resource type"},
}


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create transaction",
    responses={400: {"description": "Category not available or transaction not saved"}},
)
async def create_transaction(
    data: TransactionCreate,
    current_user: User = Depends(get_current_user),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await transaction_service.create(data.model_dump(), current_user.id)
    return TransactionResponse.model_validate(transaction)


@router.get(
    "",
    response_model=list[TransactionResponse],
    summary="List transactions",
    description="All transactions of the authenticated user, newest first.",
)
async def list_transactions(
    current_user: User = Depends(get_current_user),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionResponse]:
    transactions = await transaction_service.find_all(current_user.id)
    return [TransactionResponse.model_validate(txn) for txn in transactions]


@router.get(
    "/pagination",
    response_model=list[TransactionWithUserResponse],
    summary="List transactions page by page",
    description="One page of the authenticated user's transactions, newest first.",
)
async def list_transactions_paginated(
    page: Annotated[int, Query(ge=1, le=MAX_PAGE, description="Page number (1-indexed)")] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=settings.pagination_max_limit, description="Items per page"),
    ] = 10,
    current_user: User = Depends(get_current_user),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionWithUserResponse]:
    transactions = await transaction_service.find_all_with_pagination(
        current_user.id, page, limit
    )
    return [TransactionWithUserResponse.model_validate(txn) for txn in transactions]


@router.get(
    "/{type}/find",
    response_model=TypeTotal,
    summary="Total amount by type",
    description="Sum of amounts (minor units) over the user's transactions with this type tag.",
)
async def total_by_type(
    type: str,
    current_user: User = Depends(get_current_user),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> TypeTotal:
    total = await transaction_service.find_all_by_type(current_user.id, type)
    return TypeTotal(
        type=type,
        total=total,
        currency=settings.currency,
        minor_unit=settings.currency_minor_unit,
    )


@router.get(
    "/{resource_type}/{resource_id}",
    response_model=TransactionResponse,
    summary="Get transaction",
    responses=OWNERSHIP_RESPONSES,
)
async def get_transaction(
    resource_id: int,
    _owner: User = Depends(require_owner(ResourceType.TRANSACTION)),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    transaction = await transaction_service.find_one(resource_id)
    return TransactionResponse.model_validate(transaction)


@router.patch(
    "/{resource_type}/{resource_id}",
    response_model=AffectedResult,
    summary="Update transaction",
    responses=OWNERSHIP_RESPONSES,
)
async def update_transaction(
    resource_id: int,
    data: TransactionUpdate,
    _owner: User = Depends(require_owner(ResourceType.TRANSACTION)),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> AffectedResult:
    result = await transaction_service.update(
        resource_id, data.model_dump(exclude_unset=True)
    )
    return AffectedResult(**result)


@router.delete(
    "/{resource_type}/{resource_id}",
    response_model=AffectedResult,
    summary="Delete transaction",
    responses=OWNERSHIP_RESPONSES,
)
async def delete_transaction(
    resource_id: int,
    _owner: User = Depends(require_owner(ResourceType.TRANSACTION)),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> AffectedResult:
    result = await transaction_service.remove(resource_id)
    return AffectedResult(**result)
