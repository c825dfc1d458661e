# tests/utils/test_helpers.py
"""Tests for app/utils/helpers.py module."""

import re
from unittest.mock import MagicMock

from fastapi import FastAPI
from starlette.testclient import TestClient

from app.utils.helpers import get_summary, host, today_str


class TestTodayStr:
    """Tests for today_str function."""

    def test_format_matches_expected_pattern(self) -> None:
        """Test that the date format matches YYYY-MM-DD HH:MM:SS."""
        result = today_str()
        pattern = r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"
        assert re.match(pattern, result), f"Date format mismatch: {result}"


class TestHost:
    """Tests for host function."""

    def test_returns_client_host(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.1"
        assert host(request) == "10.0.0.1"

    def test_unknown_without_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"


class TestGetSummary:
    """Tests for get_summary function."""

    def test_returns_route_summary(self) -> None:
        app = FastAPI()
        captured: dict[str, str | None] = {}

        @app.get("/blogs/all", summary="List all blogs")
        async def list_blogs() -> dict[str, str]:
            return {}

        @app.middleware("http")
        async def capture(request, call_next):  # noqa: ANN001, ANN202
            captured["summary"] = get_summary(request)
            return await call_next(request)

        with TestClient(app) as client:
            client.get("/blogs/all")

        assert captured["summary"] == "List all blogs"

    def test_unknown_path_has_no_summary(self) -> None:
        app = FastAPI()
        captured: dict[str, str | None] = {"summary": "unset"}

        @app.middleware("http")
        async def capture(request, call_next):  # noqa: ANN001, ANN202
            captured["summary"] = get_summary(request)
            return await call_next(request)

        with TestClient(app) as client:
            client.get("/missing")

        assert captured["summary"] is None
