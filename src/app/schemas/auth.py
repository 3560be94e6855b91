"""Pydantic schemas for registration and authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    """Request model for user registration."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")


class LoginRequest(BaseModel):
    """Request model for user login."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class UserResponse(BaseModel):
    """Response model for user data (without sensitive fields)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime
    updated_at: datetime


class RegisteredUser(BaseModel):
    """Response for a new registration: the account plus a session token."""

    user: UserResponse
    token: str = Field(..., description="JWT access token")


class LoginResult(BaseModel):
    """Response model for a successful login."""

    id: int
    email: str
    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Response model for current authenticated user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
