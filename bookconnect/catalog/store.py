"""
Data store for the catalogue.

The whole catalogue lives in one JSON file with three top-level keys:
``authors`` and ``genres`` map ids to display names and ``books`` is
the list of entries. It is read once at startup and never reloaded.
A missing or unreadable file leaves the catalogue empty instead of
stopping the application; the problem is logged.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Union

from pydantic import ValidationError

from .schemas import Book, Dataset

logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "books.json"


def _load_registry(raw: object, name: str) -> Dict[str, str]:
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Ignoring %s registry: expected an object, got %s", name, type(raw).__name__)
        return {}
    return {str(k): str(v) for k, v in raw.items()}


def _load_books(raw: object) -> List[Book]:
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning("Ignoring books: expected a list, got %s", type(raw).__name__)
        return []
    books: List[Book] = []
    for index, entry in enumerate(raw):
        try:
            books.append(Book.model_validate(entry))
        except ValidationError as exc:
            # One broken entry should not hide the rest of the catalogue.
            logger.warning("Skipping book #%d: %s", index, exc.errors()[0].get("msg"))
    return books


def load_dataset(path: Union[str, Path, None] = None) -> Dataset:
    """Load books, authors and genres from ``path``.

    Parameters
    ----------
    path : str or Path, optional
        The JSON file to read. Defaults to the packaged ``books.json``.

    Returns
    -------
    Dataset
        The loaded catalogue. Empty when the file is missing or is not
        valid JSON.
    """
    data_file = Path(path) if path else DATA_FILE
    try:
        with data_file.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Could not read catalogue from %s: %s", data_file, exc)
        return Dataset()
    if not isinstance(raw, dict):
        logger.error("Catalogue file %s must contain a JSON object", data_file)
        return Dataset()

    dataset = Dataset(
        books=_load_books(raw.get("books")),
        authors=_load_registry(raw.get("authors"), "authors"),
        genres=_load_registry(raw.get("genres"), "genres"),
    )
    logger.info(
        "Loaded %d books, %d authors and %d genres from %s",
        len(dataset.books),
        len(dataset.authors),
        len(dataset.genres),
        data_file,
    )
    return dataset
