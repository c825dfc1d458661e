# app/dependencies/dependencies.py

"""Application dependencies: sessions, caller identity, services and request gates."""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import Body, Depends, HTTPException, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED

from app.configs import file_logger, settings
from app.db import get_session
from app.errors.validation import ValidationError
from app.managers.token_manager import decode_access_token
from app.models import UserDB
from app.repositories import BlogRepository, CategoryRepository, UserRepository
from app.schemas.blog import BlogSearchQuery
from app.schemas.category import CategoryCreate, category_field_errors
from app.services.blog import BlogMutationService, BlogQueryService

logger = file_logger(getLogger(__name__))

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: SessionDep,
) -> UserDB:
    """
    Get current authenticated user using user_id from token claims.

    Parameters
    ----------
    token : str
        Bearer token.
    session : AsyncSession
        Database session.

    Returns
    -------
    UserDB
        Current authenticated user.
    """
    token_data = decode_access_token(token)
    if not token_data:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_repo = UserRepository(session)
    user = await user_repo.get_by_id(token_data.user_id)

    if not user:
        raise HTTPException(
            status_code=HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Inactive user")

    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency bound to the request session."""
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_blog_query_service(repo: BlogRepoDep) -> BlogQueryService:
    """Resolve the `BlogQueryService` dependency."""
    return BlogQueryService(repo)


def get_blog_mutation_service(repo: BlogRepoDep) -> BlogMutationService:
    """Resolve the `BlogMutationService` dependency."""
    return BlogMutationService(
        repo,
        require_update_ownership=settings.BLOG_UPDATE_REQUIRES_OWNERSHIP,
    )


BlogQueryDep = Annotated[BlogQueryService, Depends(get_blog_query_service)]
BlogMutationDep = Annotated[BlogMutationService, Depends(get_blog_mutation_service)]


def get_blog_search_query(
    title: Annotated[
        str | None,
        Query(description="Case-insensitive substring of the title"),
    ] = None,
    content: Annotated[
        str | None,
        Query(description="Case-insensitive substring of the content"),
    ] = None,
    tags: Annotated[
        str | None,
        Query(description="Comma-separated tags; matches posts sharing any of them"),
    ] = None,
    author: Annotated[UUID | None, Query(description="Author ID")] = None,
    category: Annotated[UUID | None, Query(description="Category ID")] = None,
) -> BlogSearchQuery:
    """
    Dependency to construct `BlogSearchQuery` from query parameters.

    Returns
    -------
    BlogSearchQuery
        Typed search parameters.
    """
    return BlogSearchQuery(
        title=title,
        content=content,
        tags=tags,
        author=author,
        category=category,
    )


BlogSearchDep = Annotated[BlogSearchQuery, Depends(get_blog_search_query)]


def get_category_repository(session: SessionDep) -> CategoryRepository:
    """Resolve the `CategoryRepository` dependency bound to the request session."""
    return CategoryRepository(session)


CategoryRepoDep = Annotated[CategoryRepository, Depends(get_category_repository)]


async def validate_category_create(
    payload: Annotated[CategoryCreate | None, Body()] = None,
) -> CategoryCreate:
    """
    Gate category creation on a non-empty name.

    Runs before the handler; a missing or blank name short-circuits the
    request with a validation error and nothing is persisted.

    Raises
    ------
    ValidationError
        If the name is absent or empty.
    """
    payload = payload or CategoryCreate()
    if errors := category_field_errors(payload):
        logger.info(f"Category creation rejected: {errors}")
        raise ValidationError(errors=errors)
    return payload


ValidCategoryDep = Annotated[CategoryCreate, Depends(validate_category_create)]
