"""Authentication endpoints: login and profile."""

from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_user_service
from app.models.user import User
from app.schemas.auth import CurrentUser, LoginRequest, LoginResult
from app.services.user import UserService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/login",
    response_model=LoginResult,
    summary="User login",
    description="Authenticate with email and password to receive a JWT.",
    responses={401: {"description": "Invalid credentials"}},
)
async def login(
    data: LoginRequest,
    user_service: UserService = Depends(get_user_service),
) -> LoginResult:
    """
    Authenticate user and return a session token.

    Raises:
        401: Invalid credentials
    """
    result = await user_service.login(email=data.email, password=data.password)
    return LoginResult(**result)


@router.get(
    "/profile",
    response_model=CurrentUser,
    summary="Get current user",
    description="Get the authenticated user's profile information.",
)
async def get_profile(
    current_user: User = Depends(get_current_user),
) -> CurrentUser:
    """Get current authenticated user's profile."""
    return CurrentUser.model_validate(current_user)
