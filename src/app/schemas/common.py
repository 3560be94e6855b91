"""Shared response schemas."""

from pydantic import BaseModel, Field


class AffectedResult(BaseModel):
    """Summary of an update or delete: how many rows changed."""

    affected: int = Field(description="Number of rows altered")
