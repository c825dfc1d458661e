# tests/services/conftest.py
"""Pytest fixtures for services tests."""

from collections.abc import Awaitable, Callable, Sequence
from datetime import UTC, datetime
from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import BlogDB, CommentDB
from app.repositories import BlogRepository
from app.services.blog import BlogMutationService, BlogQueryService

type AddBlog = Callable[..., Awaitable[BlogDB]]


@pytest.fixture
def query_service(blog_repo: BlogRepository) -> BlogQueryService:
    return BlogQueryService(blog_repo)


@pytest.fixture
def mutation_service(blog_repo: BlogRepository) -> BlogMutationService:
    return BlogMutationService(blog_repo)


@pytest.fixture
def add_blog(session: AsyncSession) -> AddBlog:
    """Insert a committed blog row directly, bypassing the services."""

    async def _add(
        author_id: UUID,
        title: str,
        *,
        content: str = "Some content",
        tags: Sequence[str] = (),
        category_id: UUID | None = None,
        created_at: datetime | None = None,
    ) -> BlogDB:
        blog = BlogDB(
            author_id=author_id,
            title=title,
            content=content,
            tags=list(tags),
            category_id=category_id,
            created_at=created_at or datetime.now(tz=UTC),
        )
        session.add(blog)
        await session.commit()
        session.expunge_all()
        return blog

    return _add


@pytest.fixture
def add_comment(session: AsyncSession) -> Callable[[UUID, UUID, str], Awaitable[CommentDB]]:
    async def _add(blog_id: UUID, author_id: UUID, content: str) -> CommentDB:
        comment = CommentDB(blog_id=blog_id, author_id=author_id, content=content)
        session.add(comment)
        await session.commit()
        session.expunge_all()
        return comment

    return _add
