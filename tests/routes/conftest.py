# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db import get_session
from app.main import app
from app.managers.token_manager import create_access_token
from app.models import UserDB


def bearer(user: UserDB) -> dict[str, str]:
    token = create_access_token(
        user_id=user.uuid,
        username=user.username,
        expires_delta=timedelta(minutes=30),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(author: UserDB) -> dict[str, str]:
    """Auth headers for the blog author."""
    return bearer(author)


@pytest.fixture
def other_auth_headers(other_user: UserDB) -> dict[str, str]:
    """Auth headers for a user who owns nothing."""
    return bearer(other_user)


@pytest.fixture
async def client(session_maker: async_sessionmaker) -> AsyncGenerator[AsyncClient]:
    """Async client wired to the in-memory test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as request_session:
            try:
                yield request_session
                await request_session.commit()
            except Exception:
                await request_session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
