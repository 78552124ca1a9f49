"""
Pytest fixtures - isolated SQLite database per test, API client, family members.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base
from app.main import app
from app.db.session import get_db
from app.db.models import User

TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"

# Smallest valid payload: the 8-byte PNG signature
PHOTO = "data:image/png;base64,iVBORw0KGgo="
OTHER_PHOTO = "data:image/jpeg;base64,/9j/4AAQSkZJRg=="


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def _add_user(session: AsyncSession, name: str, role: str) -> User:
    user = User(name=name, role=role)
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def marie(session: AsyncSession) -> User:
    return await _add_user(session, "Marie", "parent")


@pytest_asyncio.fixture
async def jean(session: AsyncSession, marie: User) -> User:
    return await _add_user(session, "Jean", "parent")


@pytest_asyncio.fixture
async def sophie(session: AsyncSession, jean: User) -> User:
    return await _add_user(session, "sophie", "enfant")


def as_user(user: User) -> dict:
    return {"X-User-Id": str(user.id)}


@pytest.fixture
def headers():
    """headers(user) -> X-User-Id header identifying that family member."""
    return as_user


@pytest.fixture
def photo() -> str:
    return PHOTO


@pytest.fixture
def other_photo() -> str:
    return OTHER_PHOTO


@pytest.fixture
def make_item(client: AsyncClient):
    """Create an item through the API and return its JSON."""

    async def _make(user: User, **fields) -> dict:
        response = await client.post("/api/items", headers=as_user(user), json={"photo": PHOTO, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def set_level(client: AsyncClient):
    async def _set(user: User, item_id: int, level: str) -> dict:
        response = await client.post(
            f"/api/items/{item_id}/preferences", headers=as_user(user), json={"level": level}
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _set
