"""Comment database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel


class CommentDB(SQLModel, table=True):
    """
    Comment left on a blog post.

    Comments are written elsewhere; blog reads only resolve their
    content and author.
    """

    __tablename__ = cast("declared_attr[str]", "comments")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Comment ID",
    )
    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Blog ID (foreign key to blogs.id)",
    )
    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            ForeignKey("users.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        description="Comment author ID (foreign key to users.uuid)",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment body",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
