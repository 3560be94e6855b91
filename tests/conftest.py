import os

# Configure the app for tests before any `app.*` import reads settings.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("APP_ENV", "test")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.session import get_db
from app.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test, with foreign keys enforced."""
    from app.models.base import Base

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite ignores ON DELETE rules unless foreign keys are switched on
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine):
    """Provide test database session."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user for authentication tests."""
    from app.core.security import hash_password
    from app.models.user import User
    from app.repositories.user import UserRepository

    repo = UserRepository(db_session)
    return await repo.create(
        User(email="testuser@example.com", password_hash=hash_password("password123"))
    )


@pytest.fixture
async def other_user(db_session: AsyncSession):
    """A second account, for ownership tests."""
    from app.models.user import User
    from app.repositories.user import UserRepository

    repo = UserRepository(db_session)
    return await repo.create(User(email="other@example.com", password_hash="hashed"))


@pytest.fixture
async def auth_headers(test_user):
    """Provide authentication headers with valid JWT token."""
    from app.core.security import create_access_token

    token = create_access_token(user_id=test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def other_auth_headers(other_user):
    from app.core.security import create_access_token

    token = create_access_token(user_id=other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(db_session: AsyncSession):
    """Provide test client with database override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
