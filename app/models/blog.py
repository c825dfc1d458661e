"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional, cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, Relationship, SQLModel, String

if TYPE_CHECKING:
    from app.models.category import CategoryDB
    from app.models.comment import CommentDB
    from app.models.user import UserDB

# Plain JSON everywhere, JSONB (GIN-indexable) on PostgreSQL
TagsType = JSON().with_variant(JSONB(), "postgresql")


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    A post keeps the shape of a document: tags live in a JSON array on the
    row, while author, category and comments are references that can be
    resolved on read.

    The ``(author_id, title)`` pair is unique so that two concurrent
    creates with the same title cannot both succeed.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (
        UniqueConstraint("author_id", "title", name="uq_blogs_author_title"),
        Index("ix_blogs_author_created", "author_id", "created_at"),
    )

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign keys
    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            ForeignKey("users.uuid", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Author ID (foreign key to users.uuid)",
    )
    category_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "category_id",
            ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Category ID (foreign key to categories.id)",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content (markdown or plain text)",
    )

    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(TagsType, nullable=False),
        description="Blog tags for categorization",
    )

    # Timestamps (timezone-aware, full precision so ordering by creation is stable)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    # References, loaded explicitly by the repository
    author: "UserDB" = Relationship()
    category: Optional["CategoryDB"] = Relationship()
    comments: list["CommentDB"] = Relationship(
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "order_by": "CommentDB.created_at",
        },
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
                "category_id": "9b2f4c1e-7a3d-4e2b-8f6a-1c2d3e4f5a6b",
                "title": "Getting started with async SQLAlchemy",
                "content": "Async sessions make it easy to...",
                "tags": ["python", "sqlalchemy"],
            },
        },
    )
