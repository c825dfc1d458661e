"""Blog repository for database operations."""

from collections.abc import Iterable
from datetime import UTC, datetime
from logging import getLogger
from typing import Any, Literal
from uuid import UUID

from sqlalchemy import ColumnElement, Select, asc, desc, func, or_, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.configs import file_logger
from app.errors.database import DatabaseError, DuplicateEntryError
from app.models.blog import BlogDB
from app.schemas.blog import BlogCreate
from app.services.search_filter import BlogSearchFilter

logger = file_logger(getLogger(__name__))

type Reference = Literal["author", "category"]

ALL_REFERENCES: frozenset[Reference] = frozenset({"author", "category"})


class BlogRepository:
    """
    Repository for Blog database operations.

    Every query eagerly loads comment references; author and category are
    loaded only when the caller asks for them to be resolved.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    def _select(self, resolve: Iterable[Reference] = ()) -> Select[tuple[BlogDB]]:
        references = frozenset(resolve)
        # pyrefly: ignore [bad-argument-type]
        query = select(BlogDB).options(selectinload(BlogDB.comments))
        if "author" in references:
            # pyrefly: ignore [bad-argument-type]
            query = query.options(selectinload(BlogDB.author))
        if "category" in references:
            # pyrefly: ignore [bad-argument-type]
            query = query.options(selectinload(BlogDB.category))
        return query

    async def _fetch(self, query: Select[tuple[BlogDB]]) -> list[BlogDB]:
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_all(self) -> list[BlogDB]:
        """
        Get every blog, oldest first.

        Returns:
            list[BlogDB]: All blogs (unbounded)
        """
        # pyrefly: ignore [bad-argument-type]
        return await self._fetch(self._select().order_by(asc(BlogDB.created_at)))

    async def get_latest(self) -> list[BlogDB]:
        """
        Get the most recently created blog.

        Returns:
            list[BlogDB]: Zero or one blog
        """
        # pyrefly: ignore [bad-argument-type]
        query = self._select().order_by(desc(BlogDB.created_at)).limit(1)
        return await self._fetch(query)

    async def get_by_author(self, author_id: UUID) -> list[BlogDB]:
        """
        Get all blogs by a specific author.

        Args:
            author_id: Author UUID

        Returns:
            list[BlogDB]: List of blogs by the author
        """
        query = (
            self._select()
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.author_id == author_id)
            # pyrefly: ignore [bad-argument-type]
            .order_by(asc(BlogDB.created_at))
        )
        return await self._fetch(query)

    async def get_by_id(
        self,
        blog_id: UUID,
        resolve: Iterable[Reference] = (),
    ) -> BlogDB | None:
        """
        Get blog by ID.

        Args:
            blog_id: Blog UUID
            resolve: References to load alongside the blog

        Returns:
            BlogDB | None: Blog if found, None otherwise
        """
        query = (
            self._select(resolve)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.id == blog_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_title_and_author(self, title: str, author_id: UUID) -> BlogDB | None:
        """
        Find the blog an author already published under ``title``.

        Args:
            title: Exact blog title
            author_id: Author UUID

        Returns:
            BlogDB | None: Existing blog if any
        """
        # pyrefly: ignore [bad-argument-type]
        query = select(BlogDB).where(BlogDB.title == title, BlogDB.author_id == author_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def search(self, search_filter: BlogSearchFilter) -> list[BlogDB]:
        """
        Search blogs with a structured filter, resolving every reference.

        Args:
            search_filter: Filter built from the query parameters

        Returns:
            list[BlogDB]: Matching blogs, oldest first
        """
        # pyrefly: ignore [bad-argument-type]
        query = self._select(ALL_REFERENCES).order_by(asc(BlogDB.created_at))
        if clauses := self._filter_clauses(search_filter):
            query = query.where(*clauses)

        blogs = await self._fetch(query)
        logger.info(f"Found {len(blogs)} blogs matching {search_filter}")
        return blogs

    async def create(self, blog: BlogCreate, author_id: UUID) -> BlogDB:
        """
        Create a new blog post in the database.

        Args:
            blog: Validated creation payload
            author_id: UUID of the blog author

        Returns:
            BlogDB: Created blog with its author resolved

        Raises:
            DuplicateEntryError: If the author already has a blog with this title
            DatabaseError: For other integrity errors
        """
        db_blog = BlogDB(
            author_id=author_id,
            category_id=blog.category_id,
            title=blog.title,
            content=blog.content,
            tags=blog.tags,
            created_at=datetime.now(tz=UTC),
        )
        self.session.add(db_blog)
        await self._flush()
        return await self._reload(db_blog.id)

    async def update(self, db_blog: BlogDB, changes: dict[str, Any]) -> BlogDB:
        """
        Apply ``changes`` to a blog.

        Args:
            db_blog: Blog to update
            changes: Field values to write

        Returns:
            BlogDB: Updated blog with its author resolved

        Raises:
            DuplicateEntryError: If the new title collides with another blog by the author
            DatabaseError: For other integrity errors
        """
        for key, value in changes.items():
            setattr(db_blog, key, value)
        db_blog.updated_at = datetime.now(tz=UTC)

        await self._flush()
        return await self._reload(db_blog.id)

    async def delete(self, db_blog: BlogDB) -> None:
        """
        Delete a blog and its comments.

        Args:
            db_blog: Blog to delete
        """
        await self.session.delete(db_blog)
        await self.session.flush()

    async def count(self) -> int:
        """
        Count total blogs.

        Returns:
            int: Total number of blogs
        """
        # pyrefly: ignore [bad-argument-type]
        result = await self.session.execute(select(func.count()).select_from(BlogDB))
        return result.scalar() or 0

    async def _reload(self, blog_id: UUID) -> BlogDB:
        db_blog = await self.get_by_id(blog_id, resolve=("author",))
        if db_blog is None:
            mssg = f"Blog {blog_id} disappeared after write"
            raise DatabaseError(detail=mssg)
        return db_blog

    async def _flush(self) -> None:
        """
        Flush pending changes, translating integrity errors.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
        """
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(
                    detail="Blog with the same title of author already exists",
                ) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e

    def _filter_clauses(self, search_filter: BlogSearchFilter) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if search_filter.title:
            # pyrefly: ignore [missing-attribute]
            clauses.append(BlogDB.title.icontains(search_filter.title, autoescape=True))
        if search_filter.content:
            # pyrefly: ignore [missing-attribute]
            clauses.append(BlogDB.content.icontains(search_filter.content, autoescape=True))
        if search_filter.tags:
            clauses.append(self._tags_overlap(search_filter.tags))
        if search_filter.author_id is not None:
            # pyrefly: ignore [bad-argument-type]
            clauses.append(BlogDB.author_id == search_filter.author_id)
        if search_filter.category_id is not None:
            # pyrefly: ignore [bad-argument-type]
            clauses.append(BlogDB.category_id == search_filter.category_id)
        return clauses

    def _tags_overlap(self, tags: Iterable[str]) -> ColumnElement[bool]:
        """
        Match blogs whose tag array shares at least one exact tag with ``tags``.

        PostgreSQL uses JSONB key existence (GIN-indexable); other backends
        expand the array with ``json_each``.
        """
        wanted = list(tags)
        if self.session.bind.dialect.name == "postgresql":
            # pyrefly: ignore [missing-attribute]
            return or_(*[func.jsonb_exists(BlogDB.tags.cast(JSONB), tag) for tag in wanted])

        tag_values = func.json_each(BlogDB.tags).table_valued("value")
        return (
            select(1).select_from(tag_values).where(tag_values.c.value.in_(wanted)).exists()
        )
