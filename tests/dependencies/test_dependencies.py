"""Tests for app/dependencies/dependencies.py module."""

import pytest
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_current_user, validate_category_create
from app.errors import ValidationError
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.schemas import CategoryCreate


class TestValidateCategoryCreate:
    """Tests for the category creation gatekeeper."""

    @pytest.mark.parametrize("payload", [None, CategoryCreate(), CategoryCreate(name=" ")])
    async def test_rejects_missing_or_empty_name(self, payload: CategoryCreate | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await validate_category_create(payload)

        assert exc_info.value.errors == {"name": "Category name is required"}
        assert exc_info.value.status_code == 400

    async def test_passes_named_payload_through(self) -> None:
        payload = CategoryCreate(name="Tech")

        assert await validate_category_create(payload) is payload


class TestGetCurrentUser:
    """Tests for get_current_user."""

    async def test_resolves_user_from_token(self, session: AsyncSession, author: UserDB) -> None:
        token = create_access_token(user_id=author.uuid, username=author.username)

        user = await get_current_user(token, session)

        assert user.uuid == author.uuid

    async def test_invalid_token_is_unauthorized(self, session: AsyncSession) -> None:
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user("garbage", session)

        assert exc_info.value.status_code == 401

    async def test_inactive_user_is_rejected(self, session: AsyncSession) -> None:
        user = UserDB(username="gone", email="gone@example.com", is_active=False)
        session.add(user)
        await session.commit()
        token = create_access_token(user_id=user.uuid, username=user.username)

        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(token, session)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Inactive user"
