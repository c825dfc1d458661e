# app/routes/category.py

"""
Category Routes.

Category creation is gated by `validate_category_create`: a request without
a non-empty ``name`` is answered with a ``validation_error`` envelope before
the handler runs.
"""

from logging import getLogger

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.configs import file_logger
from app.dependencies import CategoryRepoDep, ValidCategoryDep
from app.errors.base import error_response
from app.errors.database import DatabaseError
from app.schemas import CategoryResponse
from app.utils.envelope import success

router = APIRouter(prefix="/categories", tags=["🏷️ Categories"])

logger = file_logger(getLogger(__name__))


@router.post(
    "",
    response_class=ORJSONResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a category",
    description="Create a category. The name must be present and non-empty.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "status": "success",
                        "message": "Category created successfully",
                        "data": {
                            "category": {
                                "id": "123e4567-e89b-12d3-a456-426614174222",
                                "name": "Engineering",
                                "createdAt": "2025-01-01T10:00:00",
                            },
                        },
                    },
                },
            },
        },
        400: {
            "description": "Missing or empty name",
            "content": {
                "application/json": {
                    "example": {
                        "status": "error",
                        "code": "validation_error",
                        "message": "Validation failed",
                        "errors": {"name": "Category name is required"},
                    },
                },
            },
        },
    },
    operation_id="categories_create",
)
async def create_category(category: ValidCategoryDep, repo: CategoryRepoDep) -> ORJSONResponse:
    """
    Create a category.

    Parameters
    ----------
    category : CategoryCreate
        Payload that already passed the name check.
    repo : CategoryRepository
        Repository dependency.

    Returns
    -------
    ORJSONResponse
        Envelope with the created ``category``.
    """
    try:
        db_category = await repo.create(category)
    except DatabaseError as e:
        logger.warning(f"Category creation failed: {e.detail}")
        return error_response(e)

    response = CategoryResponse.model_validate(db_category)
    logger.info(f"Category {db_category.id} created")
    return success(
        {"category": response.model_dump(mode="json", by_alias=True)},
        "Category created successfully",
        status_code=HTTP_201_CREATED,
    )


@router.get(
    "",
    response_class=ORJSONResponse,
    summary="List categories",
    description="Return every category, alphabetically.",
    operation_id="categories_list",
)
async def list_categories(repo: CategoryRepoDep) -> ORJSONResponse:
    """
    List categories.

    Returns
    -------
    ORJSONResponse
        Envelope with ``count`` and ``categories``.
    """
    categories = [
        CategoryResponse.model_validate(category).model_dump(mode="json", by_alias=True)
        for category in await repo.get_all()
    ]
    return success(
        {"count": len(categories), "categories": categories},
        "Categories fetched successfully",
    )
