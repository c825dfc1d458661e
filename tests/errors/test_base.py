# tests/errors/test_base.py
"""Tests for app/errors/base.py module."""

from unittest.mock import MagicMock, patch

import orjson
import pytest

from app.errors import (
    STATUS_BY_KIND,
    BaseAppError,
    DatabaseError,
    DuplicatePostError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    OtherError,
    ServerError,
    ValidationError,
    create_exception_handler,
    error_response,
)


class TestBaseAppError:
    """Tests for BaseAppError exception."""

    def test_default_values(self) -> None:
        error = BaseAppError()
        assert error.detail == "Internal Server Error"
        assert error.status_code == 500
        assert error.kind is ErrorKind.SERVER_ERROR

    def test_custom_values(self) -> None:
        error = BaseAppError(detail="Custom error", status_code=400)
        assert error.detail == "Custom error"
        assert error.status_code == 400

    def test_str_representation(self) -> None:
        assert str(BaseAppError(detail="Test error")) == "Test error"


class TestServiceErrors:
    """Each service error carries its kind and mapped status."""

    @pytest.mark.parametrize(
        ("error", "kind", "status"),
        [
            (ServerError(), ErrorKind.SERVER_ERROR, 500),
            (DuplicatePostError(), ErrorKind.DUPLICATE_POST, 400),
            (NotFoundError(), ErrorKind.NOT_FOUND, 404),
            (ForbiddenError(), ErrorKind.FORBIDDEN, 403),
            (ValidationError(), ErrorKind.VALIDATION_ERROR, 400),
            (OtherError(), ErrorKind.OTHER, 400),
        ],
    )
    def test_kind_and_status(self, error: BaseAppError, kind: ErrorKind, status: int) -> None:
        assert error.kind is kind
        assert error.status_code == status == STATUS_BY_KIND[kind]

    def test_server_error_message(self) -> None:
        assert ServerError().detail == "something went wrong"


class TestErrorResponse:
    """Tests for error_response."""

    def test_domain_error_envelope(self) -> None:
        response = error_response(NotFoundError())

        assert response.status_code == 404
        assert orjson.loads(response.body) == {
            "status": "error",
            "code": "not_found",
            "message": "Blog not found",
        }

    def test_validation_errors_are_included(self) -> None:
        response = error_response(ValidationError(errors={"name": "Category name is required"}))

        assert orjson.loads(response.body)["errors"] == {"name": "Category name is required"}

    def test_other_hides_cause_by_default(self) -> None:
        response = error_response(OtherError(cause=RuntimeError("password=hunter2")))

        assert response.status_code == 400
        assert orjson.loads(response.body) == {
            "status": "error",
            "code": "other",
            "message": "Request could not be processed",
        }

    def test_other_exposes_cause_when_enabled(self) -> None:
        with patch("app.utils.envelope.settings.EXPOSE_ERROR_DETAIL", True):
            response = error_response(OtherError(cause=RuntimeError("constraint violated")))

        assert orjson.loads(response.body)["error"] == "constraint violated"


class TestCreateExceptionHandler:
    """Tests for create_exception_handler factory function."""

    async def test_handler_with_base_app_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        request = MagicMock()
        request.client.host = "192.168.1.1"
        request.url.path = "/api/test"

        response = await handler(request, ForbiddenError())

        assert response.status_code == 403
        assert orjson.loads(response.body) == {
            "status": "error",
            "code": "forbidden",
            "message": "You are not authorized to modify this blog",
        }
        logger.warning.assert_called_once_with(
            "You are not authorized to modify this blog for ip: 192.168.1.1 for endpoint /api/test",
        )

    async def test_handler_with_generic_exception(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        request = MagicMock()
        request.client.host = "127.0.0.1"
        request.url.path = "/api/error"

        response = await handler(request, ValueError("Something went wrong"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["code"] == "other"
        logger.warning.assert_called_once_with(
            "Unhandled ValueError for ip: 127.0.0.1 for endpoint /api/error",
        )

    async def test_handler_with_database_error(self) -> None:
        logger = MagicMock()
        handler = create_exception_handler(logger)

        request = MagicMock()
        request.client = None
        request.url.path = "/api/test"

        response = await handler(request, DatabaseError(detail="Pool exhausted"))

        assert response.status_code == 500
        assert orjson.loads(response.body)["code"] == "server_error"
        logger.warning.assert_called_once_with("Pool exhausted for ip: unknown for endpoint /api/test")
