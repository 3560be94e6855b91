"""FastAPI dependency injection for authentication, stores and ownership."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.security import get_user_id_from_token
from app.db.session import get_db
from app.models.user import User
from app.repositories.category import CategoryRepository
from app.repositories.transaction import TransactionRepository
from app.repositories.user import UserRepository
from app.services.category import CategoryService
from app.services.ownership import OwnershipGuard, ResourceType
from app.services.transaction import TransactionService
from app.services.user import UserService

# Bearer token scheme; auto_error off so a missing header is a 401 like a bad token
security = HTTPBearer(auto_error=False)


async def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


async def get_category_repository(db: AsyncSession = Depends(get_db)) -> CategoryRepository:
    return CategoryRepository(db)


async def get_transaction_repository(
    db: AsyncSession = Depends(get_db),
) -> TransactionRepository:
    return TransactionRepository(db)


async def get_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(user_repo)


async def get_category_service(
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> CategoryService:
    return CategoryService(category_repo)


async def get_transaction_service(
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> TransactionService:
    return TransactionService(transaction_repo, category_repo)


async def get_ownership_guard(
    transaction_repo: TransactionRepository = Depends(get_transaction_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> OwnershipGuard:
    return OwnershipGuard(transaction_repo, category_repo)


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Extract and validate user from JWT token.

    Args:
        request: Incoming request; the user is attached to its state for logging
        credentials: HTTP bearer token credentials
        user_repo: User repository for database queries

    Returns:
        Authenticated user object

    Raises:
        HTTPException: If token is missing, invalid, expired, or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        user_id = get_user_id_from_token(credentials.credentials)
    except (JWTError, ValueError):
        raise credentials_exception

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise credentials_exception

    request.state.user = user
    return user


def require_owner(expected: ResourceType):
    """Build the ownership dependency for `/{resource_type}/{resource_id}` routes.

    A router only serves its own resource kind: a recognised tag naming the
    other kind is rejected like an unknown one, so a category the caller owns
    can't unlock a transaction route with the same id.
    """

    async def dependency(
        resource_type: str,
        resource_id: str,
        current_user: User = Depends(get_current_user),
        guard: OwnershipGuard = Depends(get_ownership_guard),
    ) -> User:
        if ResourceType.parse(resource_type) is not expected:
            raise NotFoundError("OWN_001", details={"resource_type": resource_type})
        await guard.check(current_user.id, resource_type, resource_id)
        return current_user

    return dependency
