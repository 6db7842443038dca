"""
Pytest fixtures: test client, DB session, users and tokens, GraphQL helper.
Integration tests use a fresh SQLite file per test unless TEST_DATABASE_URL is set.
"""
import os
from typing import AsyncGenerator

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./issue_tracker_test.db")
os.environ.setdefault("APP_ENV", "test")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from issue_tracker.config import get_settings
from issue_tracker.db import Base, get_db
from issue_tracker.main import app

GRAPHQL_URL = get_settings().graphql_path


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Create test engine and schema for each test."""
    url = os.environ.get("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    eng = create_async_engine(url, echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for each test."""
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autocommit=False, autoflush=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user(session: AsyncSession):
    """Existing account: owner@example.com / owner-pass."""
    from issue_tracker.core.security import hash_password
    from issue_tracker.repositories.user_repo import UserRepository

    u = await UserRepository(session).create("owner@example.com", hash_password("owner-pass"))
    await session.commit()
    return u


@pytest_asyncio.fixture
async def other_user(session: AsyncSession):
    from issue_tracker.core.security import hash_password
    from issue_tracker.repositories.user_repo import UserRepository

    u = await UserRepository(session).create("other@example.com", hash_password("other-pass"))
    await session.commit()
    return u


@pytest.fixture
def token(user) -> str:
    from issue_tracker.core.auth import create_access_token

    return create_access_token(user.id)


@pytest.fixture
def other_token(other_user) -> str:
    from issue_tracker.core.auth import create_access_token

    return create_access_token(other_user.id)


@pytest.fixture
def gql(client):
    """POST a GraphQL operation; returns the decoded JSON body."""

    async def _gql(query: str, variables: dict | None = None, token: str | None = None) -> dict:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        r = await client.post(
            GRAPHQL_URL,
            json={"query": query, "variables": variables or {}},
            headers=headers,
        )
        assert r.status_code == 200, r.text
        return r.json()

    return _gql
