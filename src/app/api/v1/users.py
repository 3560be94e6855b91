"""User registration endpoint."""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_user_service
from app.schemas.auth import RegisteredUser, UserRegister, UserResponse
from app.services.user import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=RegisteredUser,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new account and receive a session token.",
    responses={400: {"description": "Email already registered or invalid input"}},
)
async def register(
    data: UserRegister,
    user_service: UserService = Depends(get_user_service),
) -> RegisteredUser:
    """
    Register a new user account.

    Args:
        data: Registration data (email, password)
        user_service: User service

    Returns:
        Created user data (without password) and a JWT
    """
    result = await user_service.create(email=data.email, password=data.password)
    return RegisteredUser(
        user=UserResponse.model_validate(result["user"]),
        token=result["token"],
    )
