"""
Response envelope helpers.

Every handler answers with one of three shapes::

    {"status": "success", "message": ..., "data": {...}}
    {"status": "error", "code": ..., "message": ...}
    {"status": "error", "code": "other", "message": ..., "error": ...}
"""

from typing import Any

from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from app.configs import OTHER_ERROR_MESSAGE, settings
from app.schemas.envelope import ErrorEnvelope, OtherEnvelope, SuccessEnvelope


def success_body(data: dict[str, Any], message: str) -> dict[str, Any]:
    """Build a success envelope body."""
    return SuccessEnvelope(message=message, data=data).model_dump(mode="json")


def error_body(
    code: str,
    message: str,
    errors: dict[str, str] | list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a domain error envelope body; ``errors`` is omitted when empty."""
    return ErrorEnvelope(code=code, message=message, errors=errors).model_dump(
        mode="json",
        exclude_none=True,
    )


def other_body(exc: BaseException | str | None = None) -> dict[str, Any]:
    """
    Build the envelope body for an unexpected failure.

    The raw exception text is only included when ``EXPOSE_ERROR_DETAIL``
    is enabled, so production responses never leak internals.
    """
    detail = None
    if settings.EXPOSE_ERROR_DETAIL and exc is not None:
        detail = str(exc)
    return OtherEnvelope(message=OTHER_ERROR_MESSAGE, error=detail).model_dump(
        mode="json",
        exclude_none=True,
    )


def success(
    data: dict[str, Any],
    message: str,
    status_code: int = HTTP_200_OK,
) -> ORJSONResponse:
    """Wrap ``data`` in a success envelope response."""
    return ORJSONResponse(content=success_body(data, message), status_code=status_code)


def error(
    code: str,
    message: str,
    status_code: int,
    errors: dict[str, str] | list[dict[str, Any]] | None = None,
) -> ORJSONResponse:
    """Wrap a domain error in an error envelope response."""
    return ORJSONResponse(content=error_body(code, message, errors), status_code=status_code)


def other(
    exc: BaseException | str | None = None,
    status_code: int = HTTP_400_BAD_REQUEST,
) -> ORJSONResponse:
    """Wrap an unexpected failure in an envelope response."""
    return ORJSONResponse(content=other_body(exc), status_code=status_code)
