"""
Filtering of the in-memory catalogue.

``filter_books`` applies the three search form constraints (genre,
title, author) to a list of books. Every constraint must hold for a
book to be kept and the result keeps the order of the input. The
function has no side effects, so calling it twice with the same
arguments gives the same list.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from .schemas import Book, FilterCriteria


def _norm(s: Optional[str]) -> str:
    """Lowercase ``s`` for case-insensitive comparison (``None`` -> "")."""
    return (s or "").lower()


def coerce_criteria(criteria: Union[FilterCriteria, Mapping[str, Any], None]) -> FilterCriteria:
    """Turn raw form values into ``FilterCriteria``.

    Missing or ``None`` criteria mean "no constraint" on every field.
    """
    if criteria is None:
        return FilterCriteria()
    if isinstance(criteria, FilterCriteria):
        return criteria
    return FilterCriteria.model_validate(dict(criteria))


def matches_criteria(book: Book, criteria: FilterCriteria) -> bool:
    genre_match = criteria.genre_id is None or criteria.genre_id in book.genre_ids
    query = criteria.title_query
    title_match = not query.strip() or _norm(query) in _norm(book.title)
    author_match = criteria.author_id is None or criteria.author_id == book.author_id
    return genre_match and title_match and author_match


def filter_books(
    books: Sequence[Book],
    criteria: Union[FilterCriteria, Mapping[str, Any], None],
) -> List[Book]:
    """Return the books satisfying ``criteria``, in their original order.

    Parameters
    ----------
    books : Sequence[Book]
        The full catalogue. It is never modified.
    criteria : FilterCriteria or mapping
        Search form values. A plain mapping of form fields is accepted
        and parsed first, with absent fields treated as "any".

    Returns
    -------
    List[Book]
        The matching books. The objects are the ones from ``books``,
        not copies. An empty catalogue gives an empty list.
    """
    parsed = coerce_criteria(criteria)
    return [b for b in books if matches_criteria(b, parsed)]
