"""
Blog services.

``BlogQueryService`` owns every read and ``BlogMutationService`` every
write. Both return a ``ServiceResult`` instead of raising: routes turn the
result into a response envelope, so no failure escapes a handler.

The caller's identity is always passed in explicitly; nothing here reads
request state.
"""

from collections.abc import Awaitable, Callable, Iterable
from logging import getLogger
from typing import Any, Literal
from uuid import UUID

from app.configs import file_logger
from app.errors.blog import (
    DuplicatePostError,
    ForbiddenError,
    NotFoundError,
    OtherError,
    ServerError,
)
from app.errors.database import DatabaseError, DuplicateEntryError
from app.models.blog import BlogDB
from app.repositories.blog import ALL_REFERENCES, BlogRepository
from app.schemas.blog import (
    AuthorSummary,
    BlogCreate,
    BlogResponse,
    BlogUpdate,
    CategorySummary,
    CommentSummary,
)
from app.services.result import ServiceResult
from app.services.search_filter import BlogSearchFilter

logger = file_logger(getLogger(__name__))

type Resolved = Literal["author", "category", "comments"]

SEARCH_RESOLVES: frozenset[Resolved] = frozenset({*ALL_REFERENCES, "comments"})


def to_blog_response(db_blog: BlogDB, resolve: Iterable[Resolved] = ()) -> BlogResponse:
    """
    Serialize a blog, resolving the requested references.

    Only references the repository loaded may be listed in ``resolve``;
    the others are emitted as bare IDs.
    """
    references = frozenset(resolve)

    author: AuthorSummary | UUID = db_blog.author_id
    if "author" in references and db_blog.author is not None:
        author = AuthorSummary.model_validate(db_blog.author)

    category: CategorySummary | UUID | None = db_blog.category_id
    if "category" in references:
        category = CategorySummary.model_validate(db_blog.category) if db_blog.category else None

    comments: list[CommentSummary | UUID] = [
        CommentSummary.model_validate(comment) if "comments" in references else comment.id
        for comment in db_blog.comments
    ]

    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        content=db_blog.content,
        tags=list(db_blog.tags or []),
        author=author,
        category=category,
        comments=comments,
        created_at=db_blog.created_at,
        updated_at=db_blog.updated_at,
    )


class BlogQueryService:
    """Read operations. Any failure is reported as ``ServerError``."""

    def __init__(self, repo: BlogRepository) -> None:
        self.repo = repo

    async def _read[T](
        self,
        operation: str,
        call: Callable[[], Awaitable[ServiceResult[T]]],
    ) -> ServiceResult[T]:
        try:
            return await call()
        except Exception:
            logger.exception(f"Blog query '{operation}' failed")
            await self.repo.session.rollback()
            return ServiceResult.failure(ServerError())

    async def list_all(self) -> ServiceResult[list[BlogResponse]]:
        """Every blog, unfiltered and unpaginated."""

        async def call() -> ServiceResult[list[BlogResponse]]:
            blogs = await self.repo.get_all()
            return ServiceResult.success([to_blog_response(blog) for blog in blogs])

        return await self._read("list_all", call)

    async def list_latest(self) -> ServiceResult[list[BlogResponse]]:
        """The most recently created blog, as a list of zero or one element."""

        async def call() -> ServiceResult[list[BlogResponse]]:
            blogs = await self.repo.get_latest()
            return ServiceResult.success([to_blog_response(blog) for blog in blogs])

        return await self._read("list_latest", call)

    async def list_by_author(self, author_id: UUID) -> ServiceResult[list[BlogResponse]]:
        """All blogs written by the authenticated caller."""

        async def call() -> ServiceResult[list[BlogResponse]]:
            blogs = await self.repo.get_by_author(author_id)
            return ServiceResult.success([to_blog_response(blog) for blog in blogs])

        return await self._read("list_by_author", call)

    async def get_by_id(self, blog_id: UUID) -> ServiceResult[BlogResponse]:
        """One blog with its author resolved, or ``NotFoundError``."""

        async def call() -> ServiceResult[BlogResponse]:
            db_blog = await self.repo.get_by_id(blog_id, resolve=("author",))
            if db_blog is None:
                return ServiceResult.failure(NotFoundError())
            return ServiceResult.success(to_blog_response(db_blog, ("author",)))

        return await self._read("get_by_id", call)

    async def search(self, search_filter: BlogSearchFilter) -> ServiceResult[list[BlogResponse]]:
        """
        Blogs matching ``search_filter``.

        Author, category and comments are always resolved, whichever
        parameters were supplied. No match is a successful empty list.
        """

        async def call() -> ServiceResult[list[BlogResponse]]:
            blogs = await self.repo.search(search_filter)
            return ServiceResult.success(
                [to_blog_response(blog, SEARCH_RESOLVES) for blog in blogs],
            )

        return await self._read("search", call)


class BlogMutationService:
    """
    Write operations.

    Duplicate detection is a pre-check on (title, author) backed by the
    unique constraint on the table, so a create or update that loses a
    race still ends as ``DuplicatePostError``.
    """

    def __init__(self, repo: BlogRepository, *, require_update_ownership: bool = False) -> None:
        self.repo = repo
        self.require_update_ownership = require_update_ownership

    async def _write[T](
        self,
        operation: str,
        call: Callable[[], Awaitable[ServiceResult[T]]],
    ) -> ServiceResult[T]:
        try:
            return await call()
        except DuplicateEntryError:
            logger.info(f"Blog {operation} rejected by unique constraint")
            return ServiceResult.failure(DuplicatePostError())
        except DatabaseError as e:
            logger.warning(f"Blog {operation} failed: {e.detail}")
            return ServiceResult.failure(OtherError(cause=e))
        except Exception as e:
            logger.exception(f"Blog {operation} failed")
            await self.repo.session.rollback()
            return ServiceResult.failure(OtherError(cause=e))

    async def _title_taken(self, title: str, author_id: UUID, blog_id: UUID | None = None) -> bool:
        existing = await self.repo.get_by_title_and_author(title, author_id)
        return existing is not None and existing.id != blog_id

    async def create(self, author_id: UUID, payload: BlogCreate) -> ServiceResult[BlogResponse]:
        """
        Create a blog attributed to ``author_id``.

        Args:
            author_id: Authenticated caller
            payload: Validated creation payload

        Returns:
            ServiceResult[BlogResponse]: Created blog with author resolved, or
            ``DuplicatePostError`` / ``OtherError``
        """

        async def call() -> ServiceResult[BlogResponse]:
            if await self._title_taken(payload.title, author_id):
                logger.info(f"Duplicate blog title for author {author_id}")
                return ServiceResult.failure(DuplicatePostError())

            db_blog = await self.repo.create(payload, author_id)
            logger.info(f"Blog {db_blog.id} created by {author_id}")
            return ServiceResult.success(to_blog_response(db_blog, ("author",)))

        return await self._write("create", call)

    async def update(
        self,
        blog_id: UUID,
        author_id: UUID,
        payload: BlogUpdate,
    ) -> ServiceResult[BlogResponse]:
        """
        Update the fields present in ``payload``.

        The duplicate check only runs when a title is supplied. Ownership is
        checked only when ``require_update_ownership`` is set.

        Args:
            blog_id: Blog to update
            author_id: Authenticated caller
            payload: Partial update payload

        Returns:
            ServiceResult[BlogResponse]: Blog after mutation with author resolved, or
            ``DuplicatePostError`` / ``NotFoundError`` / ``ForbiddenError`` / ``OtherError``
        """
        changes: dict[str, Any] = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            # title, content and tags are NOT NULL; only the category can be cleared
            if value is not None or key == "category_id"
        }

        async def call() -> ServiceResult[BlogResponse]:
            title = changes.get("title")
            if title is not None and await self._title_taken(title, author_id, blog_id):
                logger.info(f"Duplicate blog title for author {author_id}")
                return ServiceResult.failure(DuplicatePostError())

            db_blog = await self.repo.get_by_id(blog_id)
            if db_blog is None:
                return ServiceResult.failure(NotFoundError())

            if self.require_update_ownership and db_blog.author_id != author_id:
                return ServiceResult.failure(
                    ForbiddenError("You are not authorized to update this blog"),
                )

            db_blog = await self.repo.update(db_blog, changes)
            logger.info(f"Blog {blog_id} updated by {author_id}")
            return ServiceResult.success(to_blog_response(db_blog, ("author",)))

        return await self._write("update", call)

    async def delete_by_id(self, blog_id: UUID, author_id: UUID) -> ServiceResult[dict[str, Any]]:
        """
        Delete a blog owned by ``author_id``.

        Args:
            blog_id: Blog to delete
            author_id: Authenticated caller

        Returns:
            ServiceResult[dict]: Empty payload, or ``NotFoundError`` / ``ForbiddenError``
        """

        async def call() -> ServiceResult[dict[str, Any]]:
            db_blog = await self.repo.get_by_id(blog_id)
            if db_blog is None:
                return ServiceResult.failure(NotFoundError())

            if db_blog.author_id != author_id:
                logger.warning(f"User {author_id} attempted to delete blog {blog_id}")
                return ServiceResult.failure(
                    ForbiddenError("You are not authorized to delete this blog"),
                )

            await self.repo.delete(db_blog)
            logger.info(f"Blog {blog_id} deleted by {author_id}")
            return ServiceResult.success({})

        return await self._write("delete", call)
