"""Translate blog search query parameters into a structured filter."""

from dataclasses import dataclass
from uuid import UUID

from app.schemas.blog import BlogSearchQuery


@dataclass(frozen=True, slots=True)
class BlogSearchFilter:
    """
    Structured blog search filter.

    ``title`` and ``content`` are case-insensitive substring matches,
    ``tags`` matches posts sharing at least one exact tag, ``author_id``
    and ``category_id`` are equality matches. ``None`` or an empty tuple
    leaves that dimension open.
    """

    title: str | None = None
    content: str | None = None
    tags: tuple[str, ...] = ()
    author_id: UUID | None = None
    category_id: UUID | None = None

    @property
    def is_open(self) -> bool:
        """True when no dimension is constrained."""
        return not (
            self.title
            or self.content
            or self.tags
            or self.author_id is not None
            or self.category_id is not None
        )


def split_tags(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated tag list, trimming items and dropping empty ones."""
    if not raw:
        return ()
    return tuple(dict.fromkeys(tag.strip() for tag in raw.split(",") if tag.strip()))


def _text_or_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def build_search_filter(query: BlogSearchQuery) -> BlogSearchFilter:
    """
    Build a ``BlogSearchFilter`` from raw search parameters.

    Absent or blank parameters impose no constraint.

    Args:
        query: Search parameters as received on the query string

    Returns:
        BlogSearchFilter: Filter ready to be applied by the repository
    """
    return BlogSearchFilter(
        title=_text_or_none(query.title),
        content=_text_or_none(query.content),
        tags=split_tags(query.tags),
        author_id=query.author,
        category_id=query.category,
    )
