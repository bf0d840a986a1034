"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-at-least-32-characters-long")
os.environ.setdefault("DEBUG", "true")

from tinyblog.database import Database, get_db
from tinyblog.main import app
from tinyblog.models.user import User
from tinyblog.services.users import CredentialStore
from tinyblog.utils.security import issue_token


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Fresh in-memory database with all tables created."""
    db = Database("sqlite+aiosqlite://", poolclass=StaticPool)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession]:
    """Session on the in-memory test database."""
    async with database.session() as session:
        yield session


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints against the test database."""

    async def override_get_db():
        async with database.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


def auth_headers(user: User) -> dict[str, str]:
    """Authorization header carrying a freshly issued token for the user."""
    return {"Authorization": f"Bearer {issue_token(user.id, user.username)}"}


@pytest.fixture
async def alice(database: Database) -> User:
    """Registered user 'alice' with password 'pw1'."""
    async with database.session() as session:
        return await CredentialStore(session).register("alice", "pw1")


@pytest.fixture
async def bob(database: Database) -> User:
    """Registered user 'bob' with password 'pw2'."""
    async with database.session() as session:
        return await CredentialStore(session).register("bob", "pw2")


@pytest.fixture
def alice_headers(alice: User) -> dict[str, str]:
    """Authorization header for alice."""
    return auth_headers(alice)


@pytest.fixture
def bob_headers(bob: User) -> dict[str, str]:
    """Authorization header for bob."""
    return auth_headers(bob)
