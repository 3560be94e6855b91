"""Integration tests for registration and authentication endpoints."""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import create_access_token, get_user_id_from_token
from app.models.user import User
from app.repositories.user import UserRepository


class TestUserRegistration:
    async def test_register_success(self, client: AsyncClient, db_session: AsyncSession):
        response = await client.post(
            "/api/v1/users",
            json={"email": "newuser@example.com", "password": "SecurePass123!"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "newuser@example.com"
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]
        assert get_user_id_from_token(data["token"]) == data["user"]["id"]

        user = await UserRepository(db_session).get_by_email("newuser@example.com")
        assert user is not None

    async def test_register_duplicate_email(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/v1/users",
            json={"email": test_user.email, "password": "AnotherPass123!"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "USR_001"

    async def test_register_invalid_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/users",
            json={"email": "not-an-email", "password": "SecurePass123!"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_001"

    async def test_register_short_password(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/users",
            json={"email": "test@example.com", "password": "abc"},
        )

        assert response.status_code == 400


class TestUserLogin:
    async def test_login_success(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": test_user.email, "password": "password123"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == test_user.id
        assert data["email"] == test_user.email
        assert data["token_type"] == "bearer"
        assert get_user_id_from_token(data["token"]) == test_user.id

    async def test_login_invalid_password(self, client: AsyncClient, test_user: User):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": test_user.email, "password": "wrongpassword"},
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "USR_002"

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "password123"},
        )

        assert response.status_code == 401


class TestProfile:
    async def test_profile(self, client: AsyncClient, test_user: User, auth_headers: dict):
        response = await client.get("/api/v1/auth/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"id": test_user.id, "email": test_user.email}

    async def test_profile_requires_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/profile")

        assert response.status_code == 401

    async def test_profile_rejects_bad_token(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/profile", headers={"Authorization": "Bearer not.a.token"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_profile_of_deleted_user(self, client: AsyncClient, test_user: User):
        token = create_access_token(user_id=test_user.id + 1000)

        response = await client.get(
            "/api/v1/auth/profile", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
