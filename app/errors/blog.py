"""Error kinds produced by the blog services."""

from logging import getLogger

from app.configs import DEFAULT_ERROR_MESSAGE, OTHER_ERROR_MESSAGE, file_logger
from app.errors.base import STATUS_BY_KIND, BaseAppError, ErrorKind, create_exception_handler

logger = file_logger(getLogger(__name__))


class ServiceError(BaseAppError):
    """
    Base class for failures returned by the services.

    Services hand these back inside a ``ServiceResult`` instead of raising
    them; the status code always follows the kind.
    """

    kind = ErrorKind.OTHER

    def __init__(self, detail: str = OTHER_ERROR_MESSAGE) -> None:
        super().__init__(detail, STATUS_BY_KIND[self.kind])


class ServerError(ServiceError):
    """Unexpected storage or runtime failure."""

    kind = ErrorKind.SERVER_ERROR

    def __init__(self, detail: str = DEFAULT_ERROR_MESSAGE) -> None:
        super().__init__(detail)


class DuplicatePostError(ServiceError):
    """The author already has a post with the same title."""

    kind = ErrorKind.DUPLICATE_POST

    def __init__(
        self,
        detail: str = "Blog with the same title of author already exists",
    ) -> None:
        super().__init__(detail)


class NotFoundError(ServiceError):
    """No record matches the identifier."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, detail: str = "Blog not found") -> None:
        super().__init__(detail)


class ForbiddenError(ServiceError):
    """The caller does not own the record."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, detail: str = "You are not authorized to modify this blog") -> None:
        super().__init__(detail)


class OtherError(ServiceError):
    """Anything else; ``cause`` keeps the raw detail for opt-in exposure."""

    kind = ErrorKind.OTHER

    def __init__(
        self,
        detail: str = OTHER_ERROR_MESSAGE,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(detail)
        self.cause = cause


service_exception_handler = create_exception_handler(logger)
