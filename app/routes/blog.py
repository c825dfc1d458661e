# app/routes/blog.py

"""
Blog Routes.

Provides listing, lookup, search and authenticated write endpoints for blogs.
Every endpoint answers with the standard response envelope.

Summary
-------
Endpoints include:
  - List all blogs
  - Get the latest blog
  - List the caller's own blogs
  - Search blogs
  - Get blog by id
  - Create blog
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogQueryDep`: Read service bound to the request session.
  - `BlogMutationDep`: Write service bound to the request session.
  - `CurrentUserDep`: Authenticated caller resolved from the bearer token.
"""

from collections.abc import Callable
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK, HTTP_201_CREATED

from app.dependencies import BlogMutationDep, BlogQueryDep, BlogSearchDep, CurrentUserDep
from app.errors.base import error_response
from app.schemas import BlogCreate, BlogResponse, BlogUpdate
from app.services.result import ServiceResult
from app.services.search_filter import build_search_filter
from app.utils.envelope import success

router = APIRouter(prefix="/blogs", tags=["📝 Blogs"])


BLOG_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "Getting started with async SQLAlchemy",
    "content": "Async sessions need an explicit loading strategy...",
    "tags": ["python", "sqlalchemy"],
    "author": {
        "id": "123e4567-e89b-12d3-a456-426614174111",
        "username": "jane",
        "profilePicture": None,
    },
    "category": "123e4567-e89b-12d3-a456-426614174222",
    "comments": [],
    "createdAt": "2025-01-01T10:00:00",
    "updatedAt": None,
}

SERVER_ERROR_EXAMPLE = {
    "description": "Storage failure",
    "content": {
        "application/json": {
            "example": {
                "status": "error",
                "code": "server_error",
                "message": "something went wrong",
            },
        },
    },
}

NOT_FOUND_EXAMPLE = {
    "description": "Not found",
    "content": {
        "application/json": {
            "example": {"status": "error", "code": "not_found", "message": "Blog not found"},
        },
    },
}

DUPLICATE_EXAMPLE = {
    "description": "Duplicate title for this author",
    "content": {
        "application/json": {
            "example": {
                "status": "error",
                "code": "duplicate_post",
                "message": "Blog with the same title of author already exists",
            },
        },
    },
}

UNAUTHORIZED_EXAMPLE = {
    "description": "Missing or invalid bearer token",
    "content": {
        "application/json": {"example": {"detail": "Could not validate credentials"}},
    },
}


def blog_data(blog: BlogResponse) -> dict[str, Any]:
    return {"blog": blog.model_dump(mode="json", by_alias=True)}


def blogs_data(blogs: list[BlogResponse]) -> dict[str, Any]:
    return {
        "count": len(blogs),
        "blogs": [blog.model_dump(mode="json", by_alias=True) for blog in blogs],
    }


def respond[T](
    result: ServiceResult[T],
    message: str,
    to_data: Callable[[T], dict[str, Any]],
    status_code: int = HTTP_200_OK,
) -> ORJSONResponse:
    """
    Turn a service result into an envelope response.

    Parameters
    ----------
    result : ServiceResult
        Outcome returned by a blog service.
    message : str
        Success message.
    to_data : Callable
        Builds the ``data`` object from the successful value.
    status_code : int
        Status code for the success case.

    Returns
    -------
    ORJSONResponse
        Success envelope, or the error envelope matching the failure kind.
    """
    if result.error is not None:
        return error_response(result.error)
    return success(to_data(result.unwrap()), message, status_code=status_code)


@router.get(
    "/all",
    response_class=ORJSONResponse,
    summary="List all blogs",
    description="Return every blog, unfiltered and unpaginated.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Blogs fetched successfully",
                        "data": {"count": 1, "blogs": [BLOG_EXAMPLE]},
                    },
                },
            },
        },
        500: SERVER_ERROR_EXAMPLE,
    },
    operation_id="blogs_list_all",
)
async def list_blogs(service: BlogQueryDep) -> ORJSONResponse:
    """
    List all blogs.

    Parameters
    ----------
    service : BlogQueryService
        Read service dependency.

    Returns
    -------
    ORJSONResponse
        Envelope with ``count`` and ``blogs``.
    """
    result = await service.list_all()
    return respond(result, "Blogs fetched successfully", blogs_data)


@router.get(
    "/latest",
    response_class=ORJSONResponse,
    summary="Get the latest blog",
    description="Return the most recently created blog as a list of at most one element.",
    responses={500: SERVER_ERROR_EXAMPLE},
    operation_id="blogs_latest",
)
async def latest_blog(service: BlogQueryDep) -> ORJSONResponse:
    """
    Get the most recently created blog.

    Returns
    -------
    ORJSONResponse
        Envelope with ``count`` (0 or 1) and ``blogs``.
    """
    result = await service.list_latest()
    return respond(result, "Latest blog fetched successfully", blogs_data)


@router.get(
    "/mine",
    response_class=ORJSONResponse,
    summary="List my blogs",
    description="Return every blog written by the authenticated caller.",
    responses={401: UNAUTHORIZED_EXAMPLE, 500: SERVER_ERROR_EXAMPLE},
    operation_id="blogs_list_mine",
)
async def my_blogs(service: BlogQueryDep, current_user: CurrentUserDep) -> ORJSONResponse:
    """
    List blogs by the authenticated caller.

    Parameters
    ----------
    service : BlogQueryService
        Read service dependency.
    current_user : UserDB
        Authenticated caller.

    Returns
    -------
    ORJSONResponse
        Envelope with ``count`` and ``blogs``.
    """
    result = await service.list_by_author(current_user.uuid)
    return respond(result, "Blogs fetched successfully", blogs_data)


@router.get(
    "/search",
    response_class=ORJSONResponse,
    summary="Search blogs",
    description=(
        "Filter blogs by title/content substring, tag overlap, author and category. "
        "All supplied parameters must match; with none supplied every blog is returned."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Search results fetched successfully",
                        "data": {"count": 0, "blogs": []},
                    },
                },
            },
        },
        500: SERVER_ERROR_EXAMPLE,
    },
    operation_id="blogs_search",
)
async def search_blogs(service: BlogQueryDep, query: BlogSearchDep) -> ORJSONResponse:
    """
    Search blogs.

    Parameters
    ----------
    service : BlogQueryService
        Read service dependency.
    query : BlogSearchQuery
        Typed search parameters.

    Returns
    -------
    ORJSONResponse
        Envelope with ``count`` and ``blogs``; author, category and comments resolved.
    """
    result = await service.search(build_search_filter(query))
    return respond(result, "Search results fetched successfully", blogs_data)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Get blog by ID",
    description="Retrieve a blog with its author resolved.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Blog fetched successfully",
                        "data": {"blog": BLOG_EXAMPLE},
                    },
                },
            },
        },
        404: NOT_FOUND_EXAMPLE,
        500: SERVER_ERROR_EXAMPLE,
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, service: BlogQueryDep) -> ORJSONResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    service : BlogQueryService
        Read service dependency.

    Returns
    -------
    ORJSONResponse
        Envelope with ``blog``, or a ``not_found`` error.
    """
    result = await service.get_by_id(blog_id)
    return respond(result, "Blog fetched successfully", blog_data)


@router.post(
    "",
    response_class=ORJSONResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description="Create a blog attributed to the authenticated caller.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Blog created successfully",
                        "data": {"blog": BLOG_EXAMPLE},
                    },
                },
            },
        },
        400: DUPLICATE_EXAMPLE,
        401: UNAUTHORIZED_EXAMPLE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples={
                "basic": {
                    "summary": "Basic blog creation",
                    "value": {
                        "title": "Getting started with async SQLAlchemy",
                        "content": "Async sessions need an explicit loading strategy...",
                        "tags": ["python", "sqlalchemy"],
                        "category": "123e4567-e89b-12d3-a456-426614174222",
                    },
                },
            },
        ),
    ],
    service: BlogMutationDep,
    current_user: CurrentUserDep,
) -> ORJSONResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    service : BlogMutationService
        Write service dependency.
    current_user : UserDB
        Authenticated caller, recorded as the author.

    Returns
    -------
    ORJSONResponse
        Envelope with the created ``blog``, or a ``duplicate_post`` error.
    """
    result = await service.create(current_user.uuid, blog)
    return respond(result, "Blog created successfully", blog_data, status_code=HTTP_201_CREATED)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Update a blog post",
    description="Update the supplied fields of a blog.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Blog updated successfully",
                        "data": {"blog": BLOG_EXAMPLE},
                    },
                },
            },
        },
        400: DUPLICATE_EXAMPLE,
        401: UNAUTHORIZED_EXAMPLE,
        404: NOT_FOUND_EXAMPLE,
    },
    operation_id="blogs_update",
)
@router.patch(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Partially update a blog post",
    description="Same as PUT; only the supplied fields change.",
    operation_id="blogs_patch",
)
async def update_blog(
    blog_id: UUID,
    blog: BlogUpdate,
    service: BlogMutationDep,
    current_user: CurrentUserDep,
) -> ORJSONResponse:
    """
    Update a blog post.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    blog : BlogUpdate
        Partial update payload.
    service : BlogMutationService
        Write service dependency.
    current_user : UserDB
        Authenticated caller.

    Returns
    -------
    ORJSONResponse
        Envelope with the updated ``blog``.
    """
    result = await service.update(blog_id, current_user.uuid, blog)
    return respond(result, "Blog updated successfully", blog_data)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    summary="Delete a blog post",
    description="Delete a blog owned by the authenticated caller.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Blog deleted successfully",
                        "data": {},
                    },
                },
            },
        },
        401: UNAUTHORIZED_EXAMPLE,
        403: {
            "description": "Caller is not the author",
            "content": {
                "application/json": {
                    "example": {
                        "status": "error",
                        "code": "forbidden",
                        "message": "You are not authorized to delete this blog",
                    },
                },
            },
        },
        404: NOT_FOUND_EXAMPLE,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    service: BlogMutationDep,
    current_user: CurrentUserDep,
) -> ORJSONResponse:
    """
    Delete a blog post.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    service : BlogMutationService
        Write service dependency.
    current_user : UserDB
        Authenticated caller; must be the author.

    Returns
    -------
    ORJSONResponse
        Envelope with empty ``data``.
    """
    result = await service.delete_by_id(blog_id, current_user.uuid)
    return respond(result, "Blog deleted successfully", lambda value: value)
