"""
Page arithmetic for the "show more" list.

Pages are 1-indexed and cumulative: page ``n`` shows the first
``n * page_size`` matches. "Show more" appends the next batch and moves
to the following page.
"""

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel

from .schemas import Book


class PageWindow(BaseModel):
    """Everything the list needs to know about the current page."""

    page: int
    page_size: int
    total: int
    visible: List[Book]
    next_batch: List[Book]
    remaining: int

    @property
    def can_show_more(self) -> bool:
        return self.remaining > 0


def _check(page: int, page_size: int) -> None:
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


def visible_slice(matches: Sequence[Book], page: int, page_size: int) -> List[Book]:
    """Books shown once ``page`` pages are revealed."""
    _check(page, page_size)
    return list(matches[: page * page_size])


def next_page_slice(matches: Sequence[Book], page: int, page_size: int) -> List[Book]:
    """The batch appended when moving from ``page`` to ``page + 1``."""
    _check(page, page_size)
    start = page * page_size
    return list(matches[start : start + page_size])


def remaining_count(total: int, page: int, page_size: int) -> int:
    _check(page, page_size)
    return max(0, total - page * page_size)


def can_show_more(total: int, page: int, page_size: int) -> bool:
    return remaining_count(total, page, page_size) > 0


def paginate(matches: Sequence[Book], page: int, page_size: int) -> PageWindow:
    return PageWindow(
        page=page,
        page_size=page_size,
        total=len(matches),
        visible=visible_slice(matches, page, page_size),
        next_batch=next_page_slice(matches, page, page_size),
        remaining=remaining_count(len(matches), page, page_size),
    )
