"""
Blog schemas.

Typed request structs validated at the boundary before reaching the
services, and the response models posts are serialized into.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.configs.settings import (
    MAX_CONTENT_LENGTH,
    MAX_TAG_LENGTH,
    MAX_TAGS_COUNT,
    MAX_TITLE_LENGTH,
)


def normalize_tags(tags: list[str]) -> list[str]:
    """Strip tags, drop empty ones and remove duplicates while keeping order."""
    seen: dict[str, None] = {}
    for tag in tags:
        stripped = tag.strip()
        if not stripped:
            continue
        if len(stripped) > MAX_TAG_LENGTH:
            mssg = f"Each tag must be at most {MAX_TAG_LENGTH} characters"
            raise ValueError(mssg)
        seen.setdefault(stripped, None)
    return list(seen)


class BlogCreate(BaseModel):
    """Blog creation payload; the author always comes from the session."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["Getting started with async SQLAlchemy"],
    )
    content: str = Field(
        ...,
        min_length=1,
        max_length=MAX_CONTENT_LENGTH,
        description="Blog content (markdown or plain text)",
    )
    tags: list[str] = Field(
        default_factory=list,
        max_length=MAX_TAGS_COUNT,
        description="Blog tags for categorization",
        examples=[["python", "sqlalchemy"]],
    )
    category_id: UUID | None = Field(
        default=None,
        alias="category",
        description="Category ID",
    )

    @field_validator("title", mode="after")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Reject blank titles."""
        stripped = v.strip()
        if not stripped:
            mssg = "Title must not be blank"
            raise ValueError(mssg)
        return stripped

    @field_validator("tags", mode="after")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Normalize tags."""
        return normalize_tags(v)


class BlogUpdate(BaseModel):
    """Blog update payload (all fields optional, only provided fields are written)."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Getting started with async SQLAlchemy (2nd edition)",
                "tags": ["python", "sqlalchemy", "asyncio"],
            },
        },
    )

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str | None = Field(default=None, min_length=1, max_length=MAX_CONTENT_LENGTH)
    tags: list[str] | None = Field(default=None, max_length=MAX_TAGS_COUNT)
    category_id: UUID | None = Field(default=None, alias="category")

    @field_validator("title", mode="after")
    @classmethod
    def validate_title_if_provided(cls, v: str | None) -> str | None:
        """Reject blank titles when a title is provided."""
        if v is None:
            return v
        stripped = v.strip()
        if not stripped:
            mssg = "Title must not be blank"
            raise ValueError(mssg)
        return stripped

    @field_validator("tags", mode="after")
    @classmethod
    def validate_tags_if_provided(cls, v: list[str] | None) -> list[str] | None:
        """Normalize tags when provided."""
        return v if v is None else normalize_tags(v)


class BlogSearchQuery(BaseModel):
    """Raw search parameters as received on the query string."""

    title: str | None = None
    content: str | None = None
    tags: str | None = Field(default=None, description="Comma-separated tag list")
    author: UUID | None = None
    category: UUID | None = None


class AuthorSummary(BaseModel):
    """Public projection of a post author."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID = Field(validation_alias="uuid", serialization_alias="id")
    username: str
    profile_picture: str | None = Field(default=None, serialization_alias="profilePicture")


class CategorySummary(BaseModel):
    """Resolved category reference."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class CommentSummary(BaseModel):
    """Resolved comment reference; the comment author stays a bare ID."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID
    content: str
    author: UUID = Field(validation_alias="author_id")


class BlogResponse(BaseModel):
    """
    Blog response model.

    References are serialized as bare UUIDs unless the read resolved them.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    content: str
    tags: list[str]
    author: AuthorSummary | UUID
    category: CategorySummary | UUID | None = None
    comments: list[CommentSummary | UUID] = Field(default_factory=list)
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")
