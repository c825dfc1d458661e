# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before the app settings are imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BLOG_UPDATE_REQUIRES_OWNERSHIP"] = "false"
os.environ["EXPOSE_ERROR_DETAIL"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession  # noqa: E402

from app.models import BlogDB, CategoryDB, CommentDB, UserDB  # noqa: E402, F401
from app.repositories import BlogRepository  # noqa: E402


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database per test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[SQLModelAsyncSession]:
    return async_sessionmaker(
        engine,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[SQLModelAsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_maker() as test_session:
        yield test_session


@pytest.fixture
async def author(session: AsyncSession) -> UserDB:
    """Persisted user who writes the posts under test."""
    user = UserDB(username="jane", email="jane@example.com", profile_picture="https://img/jane.png")
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def other_user(session: AsyncSession) -> UserDB:
    """Persisted user who does not own the posts under test."""
    user = UserDB(username="mallory", email="mallory@example.com")
    session.add(user)
    await session.commit()
    return user


@pytest.fixture
async def category(session: AsyncSession) -> CategoryDB:
    db_category = CategoryDB(name="Engineering")
    session.add(db_category)
    await session.commit()
    return db_category


@pytest.fixture
def blog_repo(session: AsyncSession) -> BlogRepository:
    return BlogRepository(session)
