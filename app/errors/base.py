from collections.abc import Awaitable, Callable
from enum import StrEnum
from logging import Logger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.utils.envelope import error, other
from app.utils.helpers import host


class ErrorKind(StrEnum):
    """Error kinds surfaced to clients as the envelope ``code``."""

    SERVER_ERROR = "server_error"
    DUPLICATE_POST = "duplicate_post"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    VALIDATION_ERROR = "validation_error"
    OTHER = "other"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.SERVER_ERROR: HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.DUPLICATE_POST: HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION_ERROR: HTTP_400_BAD_REQUEST,
    ErrorKind.OTHER: HTTP_400_BAD_REQUEST,
}


class BaseAppError(Exception):
    """Base exception class for application errors."""

    kind: ErrorKind = ErrorKind.SERVER_ERROR

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_response(exc: BaseAppError) -> ORJSONResponse:
    """
    Convert an application error into its envelope response.

    Args:
        exc: Application error carrying kind, detail and status code.

    Returns:
        ORJSONResponse: "other" envelope for ``ErrorKind.OTHER``, error envelope otherwise.
    """
    if exc.kind is ErrorKind.OTHER:
        return other(getattr(exc, "cause", None), status_code=exc.status_code)

    return error(
        code=str(exc.kind),
        message=exc.detail,
        status_code=exc.status_code,
        errors=getattr(exc, "errors", None) or None,
    )


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Application errors become error envelopes carrying their kind as
    ``code``; anything else becomes an "other" envelope.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        if not isinstance(exc, BaseAppError):
            logger.warning(
                f"Unhandled {type(exc).__name__} for ip: {host(request)} "
                f"for endpoint {request.url.path}",
            )
            return other(exc, status_code=HTTP_500_INTERNAL_SERVER_ERROR)

        logger.warning(f"{exc.detail} for ip: {host(request)} for endpoint {request.url.path}")
        return error_response(exc)

    return handler
