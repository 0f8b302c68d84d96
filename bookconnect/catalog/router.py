"""
Route definitions for the catalogue API.

Every user action on the catalogue page is posted as an event and the
response is the list of directives the page should apply, in order.

Endpoints under /api/catalog:
- POST /events/start            : first render of the page
- POST /events/search           : search form submitted
- POST /events/show-more        : "show more" button clicked
- POST /events/card/{book_id}   : a book card clicked (preview)
- POST /events/theme            : theme form submitted
- GET  /state                   : snapshot of the browse session
- GET  /books/{book_id}         : one book
- GET  /authors, GET /genres    : dropdown options
"""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import List, NamedTuple, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from ..config import Config
from .controller import (
    CardClicked,
    CatalogController,
    Event,
    SearchSubmitted,
    ShowMoreClicked,
    ThemeSubmitted,
)
from .lookup import find_book_by_id
from .presenter import DirectiveRecorder
from .schemas import Book, Directive, DropdownOption, FilterCriteria, SessionState
from .store import load_dataset

router = APIRouter(prefix="/api/catalog", tags=["catalog"])

# FastAPI runs these handlers in a thread pool while the controller
# expects one event at a time.
_dispatch_lock = threading.Lock()


class Catalog(NamedTuple):
    controller: CatalogController
    recorder: DirectiveRecorder


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Build the process-wide catalogue on first use."""
    recorder = DirectiveRecorder()
    controller = CatalogController(
        load_dataset(Config.DATA_FILE),
        recorder,
        page_size=Config.BOOKS_PER_PAGE,
        default_theme=Config.DEFAULT_THEME,
    )
    return Catalog(controller, recorder)


def _run(catalog: Catalog, event: Optional[Event] = None) -> List[Directive]:
    with _dispatch_lock:
        if event is None:
            catalog.controller.start()
        else:
            catalog.controller.dispatch(event)
        return catalog.recorder.drain()


@router.post("/events/start", response_model=List[Directive])
def start(catalog: Catalog = Depends(get_catalog)) -> List[Directive]:
    return _run(catalog)


@router.post("/events/search", response_model=List[Directive])
def search(
    criteria: Optional[FilterCriteria] = Body(default=None),
    catalog: Catalog = Depends(get_catalog),
) -> List[Directive]:
    return _run(catalog, SearchSubmitted(criteria=criteria))


@router.post("/events/show-more", response_model=List[Directive])
def show_more(catalog: Catalog = Depends(get_catalog)) -> List[Directive]:
    return _run(catalog, ShowMoreClicked())


@router.post("/events/card/{book_id}", response_model=List[Directive])
def card_clicked(book_id: str, catalog: Catalog = Depends(get_catalog)) -> List[Directive]:
    """Preview a book. An unknown id yields no directives."""
    return _run(catalog, CardClicked(book_id=book_id))


@router.post("/events/theme", response_model=List[Directive])
def theme_submitted(
    theme: str = Body("day", embed=True),
    catalog: Catalog = Depends(get_catalog),
) -> List[Directive]:
    return _run(catalog, ThemeSubmitted(theme=theme))


@router.get("/state", response_model=SessionState)
def state(catalog: Catalog = Depends(get_catalog)) -> SessionState:
    with _dispatch_lock:
        return catalog.controller.state()


@router.get("/books/{book_id}", response_model=Book)
def get_book(book_id: str, catalog: Catalog = Depends(get_catalog)) -> Book:
    book = find_book_by_id(catalog.controller.books, book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.get("/authors", response_model=List[DropdownOption])
def list_authors(catalog: Catalog = Depends(get_catalog)) -> List[DropdownOption]:
    return CatalogController.dropdown_options(catalog.controller.authors, "All Authors")


@router.get("/genres", response_model=List[DropdownOption])
def list_genres(catalog: Catalog = Depends(get_catalog)) -> List[DropdownOption]:
    return CatalogController.dropdown_options(catalog.controller.genres, "All Genres")
