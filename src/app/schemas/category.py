"""Pydantic schemas for category endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    """Request model for creating a category."""

    title: str = Field(..., min_length=1, max_length=255, description="Category title")


class CategoryUpdate(BaseModel):
    """Partial update; only fields present in the request are applied."""

    title: str | None = Field(None, min_length=1, max_length=255)


class CategoryTransaction(BaseModel):
    """Transaction as nested inside a category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    type: str | None
    amount: int
    created_at: datetime


class CategoryResponse(BaseModel):
    """Category data for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    user_id: int
    created_at: datetime
    updated_at: datetime


class CategoryDetailResponse(CategoryResponse):
    """Category with its transactions attached."""

    transactions: list[CategoryTransaction] = Field(default_factory=list)
