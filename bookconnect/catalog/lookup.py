"""Lookup of a single book for the preview overlay."""

from __future__ import annotations

from typing import Optional, Sequence

from .schemas import Book


def find_book_by_id(books: Sequence[Book], book_id: str) -> Optional[Book]:
    """Return the first book whose id equals ``book_id``, else ``None``.

    The catalogue is small, so this is a plain linear scan.
    """
    wanted = str(book_id)
    return next((b for b in books if str(b.id) == wanted), None)
