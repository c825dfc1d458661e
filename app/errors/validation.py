"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import Any, cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from app.configs import file_logger
from app.errors.base import STATUS_BY_KIND, BaseAppError, ErrorKind
from app.utils.envelope import error
from app.utils.helpers import host

logger = file_logger(getLogger(__name__))


class ValidationError(BaseAppError):
    """Raised at the request boundary when a required field is missing or empty."""

    kind = ErrorKind.VALIDATION_ERROR

    def __init__(
        self,
        detail: str = "Validation failed",
        errors: dict[str, str] | list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail=detail, status_code=STATUS_BY_KIND[self.kind])
        self.errors = errors or {}


def format_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """
    Flatten pydantic errors into ``{field, message, type}`` items.

    Args:
        exc: The RequestValidationError raised by FastAPI.

    Returns:
        list[dict[str, Any]]: One entry per failing field.
    """
    formatted_errors = []
    for err in exc.errors():
        formatted_error: dict[str, Any] = {
            # Skip the location prefix ('body', 'query', 'path')
            "field": ".".join(str(loc) for loc in err.get("loc", [])[1:]),
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "validation_error"),
        }
        # Convert non-serializable values (like ValueError) to strings
        if "ctx" in err:
            formatted_error["context"] = {
                key: str(value) if isinstance(value, Exception) else value
                for key, value in err["ctx"].items()
            }
        formatted_errors.append(formatted_error)
    return formatted_errors


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle Pydantic validation errors with the envelope response format.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    formatted_errors = format_validation_errors(cast(RequestValidationError, exc))

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return error(
        code=str(ErrorKind.VALIDATION_ERROR),
        message="Validation failed",
        status_code=STATUS_BY_KIND[ErrorKind.VALIDATION_ERROR],
        errors=formatted_errors,
    )
