# tests/services/test_search_filter.py
"""Tests for app/services/search_filter.py module."""

from uuid import uuid4

import pytest

from app.schemas import BlogSearchQuery
from app.services.search_filter import BlogSearchFilter, build_search_filter, split_tags


class TestSplitTags:
    """Tests for split_tags function."""

    @pytest.mark.parametrize("raw", [None, "", " , ,"])
    def test_empty_input_gives_no_tags(self, raw: str | None) -> None:
        assert split_tags(raw) == ()

    def test_items_are_trimmed_and_deduplicated(self) -> None:
        assert split_tags(" a, b ,a,,c ") == ("a", "b", "c")

    def test_case_is_preserved(self) -> None:
        assert split_tags("Python,python") == ("Python", "python")


class TestBuildSearchFilter:
    """Tests for build_search_filter function."""

    def test_no_parameters_is_open(self) -> None:
        search_filter = build_search_filter(BlogSearchQuery())

        assert search_filter == BlogSearchFilter()
        assert search_filter.is_open

    def test_blank_text_is_ignored(self) -> None:
        search_filter = build_search_filter(BlogSearchQuery(title="   ", content=""))

        assert search_filter.title is None
        assert search_filter.content is None
        assert search_filter.is_open

    def test_every_dimension_is_carried(self) -> None:
        author_id = uuid4()
        category_id = uuid4()

        search_filter = build_search_filter(
            BlogSearchQuery(
                title=" Async ",
                content="engine",
                tags="a,b",
                author=author_id,
                category=category_id,
            ),
        )

        assert search_filter == BlogSearchFilter(
            title="Async",
            content="engine",
            tags=("a", "b"),
            author_id=author_id,
            category_id=category_id,
        )
        assert not search_filter.is_open

    def test_regex_metacharacters_are_kept_verbatim(self) -> None:
        search_filter = build_search_filter(BlogSearchQuery(title="c++ (part 1)"))

        assert search_filter.title == "c++ (part 1)"
