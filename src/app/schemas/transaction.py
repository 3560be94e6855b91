"""Pydantic schemas for transaction endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.base import MAX_BIGINT, MAX_ID, MIN_BIGINT
from app.schemas.auth import CurrentUser


class TransactionCreate(BaseModel):
    """Request model for creating a transaction."""

    title: str = Field(..., min_length=1, max_length=255)
    amount: int = Field(
        ...,
        ge=MIN_BIGINT,
        le=MAX_BIGINT,
        description="Signed amount in minor currency units (e.g. cents)",
    )
    type: str | None = Field(None, max_length=50, description="Free-form tag, e.g. income/expense")
    category_id: int | None = Field(
        None, gt=0, le=MAX_ID, description="Category owned by the caller"
    )


class TransactionUpdate(BaseModel):
    """Partial update; only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)
    amount: int | None = Field(None, ge=MIN_BIGINT, le=MAX_BIGINT)
    type: str | None = Field(None, max_length=50)
    category_id: int | None = Field(None, gt=0, le=MAX_ID)


class TransactionCategory(BaseModel):
    """Category summary attached to a transaction."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class TransactionResponse(BaseModel):
    """Transaction data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    type: str | None
    amount: int
    user_id: int
    category: TransactionCategory | None = None
    created_at: datetime
    updated_at: datetime


class TransactionWithUserResponse(TransactionResponse):
    """Paginated listing entry: transaction with its owner attached."""

    user: CurrentUser


class TypeTotal(BaseModel):
    """Aggregate amount for one transaction type."""

    type: str
    total: int = Field(description="Sum of amounts in minor currency units")
    currency: str = Field(description="ISO 4217 code the amounts are in")
    minor_unit: int = Field(description="Decimal places between minor and major units")
