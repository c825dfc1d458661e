from app.errors.base import (
    STATUS_BY_KIND,
    BaseAppError,
    ErrorKind,
    create_exception_handler,
    error_response,
)
from app.errors.blog import (
    DuplicatePostError,
    ForbiddenError,
    NotFoundError,
    OtherError,
    ServerError,
    ServiceError,
    service_exception_handler,
)
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    database_exception_handler,
)
from app.errors.validation import ValidationError, validation_exception_handler

__all__ = [
    "STATUS_BY_KIND",
    "BaseAppError",
    "ErrorKind",
    "create_exception_handler",
    "error_response",
    "ServiceError",
    "ServerError",
    "DuplicatePostError",
    "NotFoundError",
    "ForbiddenError",
    "OtherError",
    "service_exception_handler",
    "DatabaseError",
    "DatabaseConnectionError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "database_exception_handler",
    "ValidationError",
    "validation_exception_handler",
]
