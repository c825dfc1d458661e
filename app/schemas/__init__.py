from app.schemas.auth import TokenData
from app.schemas.blog import (
    AuthorSummary,
    BlogCreate,
    BlogResponse,
    BlogSearchQuery,
    BlogUpdate,
    CategorySummary,
    CommentSummary,
)
from app.schemas.category import CategoryCreate, CategoryResponse, category_field_errors
from app.schemas.envelope import ErrorEnvelope, OtherEnvelope, SuccessEnvelope

__all__ = [
    "AuthorSummary",
    "BlogCreate",
    "BlogResponse",
    "BlogSearchQuery",
    "BlogUpdate",
    "CategoryCreate",
    "CategoryResponse",
    "CategorySummary",
    "CommentSummary",
    "ErrorEnvelope",
    "OtherEnvelope",
    "SuccessEnvelope",
    "TokenData",
    "category_field_errors",
]
