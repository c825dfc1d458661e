"""Category schemas and the creation gatekeeper check."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.configs.settings import MAX_CATEGORY_NAME_LENGTH

CATEGORY_NAME_REQUIRED = "Category name is required"


class CategoryCreate(BaseModel):
    """
    Category creation payload.

    ``name`` is optional at the schema level so that a missing name reaches
    ``category_field_errors`` and gets the same answer as an empty one.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, max_length=MAX_CATEGORY_NAME_LENGTH)


class CategoryResponse(BaseModel):
    """Category response model."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    created_at: datetime = Field(serialization_alias="createdAt")


def category_field_errors(payload: CategoryCreate) -> dict[str, str]:
    """
    Return field errors for a category creation payload.

    An empty mapping means the request may proceed.
    """
    if not payload.name or not payload.name.strip():
        return {"name": CATEGORY_NAME_REQUIRED}
    return {}
