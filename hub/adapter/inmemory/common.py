"""Shared helpers for in-memory repositories."""

from datetime import datetime, timezone
from math import ceil
from typing import Optional, TypeVar
from uuid import uuid4

from hub.domain.model.pagination import Page, Pagination

T = TypeVar("T")

DEFAULT_LIMIT = 10


def new_id() -> str:
    """Generate a backend-style opaque identifier."""
    return uuid4().hex[:24]


def now() -> datetime:
    return datetime.now(timezone.utc)


def paginate(items: list[T], page: Optional[int], limit: Optional[int]) -> Page[T]:
    """Slice a list the way the API paginates (1-based pages).

    Pages past the end are clamped to the last page.
    """
    limit = limit or DEFAULT_LIMIT
    total = len(items)
    pages = ceil(total / limit)
    page = min(page or 1, max(pages, 1))
    start = (page - 1) * limit
    return Page(
        items=items[start : start + limit],
        pagination=Pagination(current=page, pages=pages, total=total),
    )
