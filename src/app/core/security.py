"""Security utilities for password hashing and JWT token management."""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import settings
from app.models.base import MAX_ID

# Password hashing with Argon2
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    """
    Hash a password using Argon2.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Password to verify
        hashed_password: Stored password hash

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    user_id: int, email: str | None = None, expires_delta: timedelta | None = None
) -> str:
    """
    Create a signed JWT session token.

    Args:
        user_id: User ID to encode in token
        email: Optional email claim, echoed back to clients
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_expire_minutes)

    expire = datetime.now(timezone.utc) + expires_delta
    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    if email is not None:
        to_encode["email"] = email
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def get_user_id_from_token(token: str) -> int:
    """
    Extract user ID from a JWT access token.

    Args:
        token: JWT token string

    Returns:
        User ID as a positive integer

    Raises:
        JWTError: If token is invalid, expired, or not an access token
        ValueError: If the subject is not a valid user id
    """
    payload = decode_token(token)
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise JWTError("Token is not an access token")

    user_id_str = payload.get("sub")
    if user_id_str is None:
        raise JWTError("Token missing 'sub' claim")

    user_id = int(user_id_str)
    if not 0 < user_id <= MAX_ID:
        raise ValueError("User id out of range")
    return user_id
