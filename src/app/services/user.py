"""User service: registration, lookup and login."""

import logging

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import AuthenticationError, BadRequestError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.repositories.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for account operations."""

    def __init__(self, user_repo: UserRepository):
        """
        Initialize user service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def create(self, email: str, password: str) -> dict:
        """
        Register a new user and issue a session token.

        Args:
            email: User email address
            password: Plain text password

        Returns:
            {"user": created User, "token": signed JWT}

        Raises:
            BadRequestError: If email already exists
        """
        if await self.user_repo.email_exists(email):
            raise BadRequestError("USR_001")

        user = User(email=email, password_hash=hash_password(password))
        try:
            created_user = await self.user_repo.create(user)
        except IntegrityError:
            # Lost a registration race for the same email
            await self.user_repo.rollback()
            raise BadRequestError("USR_001") from None
        logger.info("User registered", extra={"user_id": created_user.id})

        token = create_access_token(created_user.id, email=created_user.email)
        return {"user": created_user, "token": token}

    async def find_one(self, email: str) -> User | None:
        """Find a user by email; None if absent."""
        return await self.user_repo.get_by_email(email)

    async def login(self, email: str, password: str) -> dict:
        """
        Verify credentials and issue a session token.

        Raises:
            AuthenticationError: If email is unknown or password is wrong
        """
        user = await self.find_one(email)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("USR_002")

        return {
            "id": user.id,
            "email": user.email,
            "token": create_access_token(user.id, email=user.email),
        }
