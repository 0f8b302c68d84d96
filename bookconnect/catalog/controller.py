"""
Browse session and event handling for the catalogue.

``CatalogController`` owns the ``BrowseSession`` (which books match the
last search and how many pages of them are revealed) and turns user
events into calls on a ``PresentationAdapter``. Events are small typed
models passed to ``dispatch``. The controller is synchronous and must
only see one event at a time; callers sharing it between threads have
to serialise access themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field, field_validator

from . import pagination
from .filters import coerce_criteria, filter_books
from .lookup import find_book_by_id
from .presenter import PresentationAdapter
from .schemas import (
    ANY,
    Book,
    BookCard,
    BookDetails,
    Dataset,
    DropdownOption,
    FilterCriteria,
    SessionState,
    ShowMoreButton,
)
from .themes import Theme, normalize_theme, palette_for

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"


# ---------------------------------------------------------------------------
# Events


class SearchSubmitted(BaseModel):
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)

    @field_validator("criteria", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return coerce_criteria(value)


class ShowMoreClicked(BaseModel):
    pass


class CardClicked(BaseModel):
    book_id: str


class ThemeSubmitted(BaseModel):
    theme: Theme = "day"

    @field_validator("theme", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Theme:
        return normalize_theme(value)


Event = Union[SearchSubmitted, ShowMoreClicked, CardClicked, ThemeSubmitted]


# ---------------------------------------------------------------------------
# Session


class BrowseSession:
    """Which books match and how far the list has been revealed.

    ``matches`` and ``current_page`` are only ever replaced together via
    ``reset`` or advanced via ``next_page``.
    """

    def __init__(self, all_books: Sequence[Book], page_size: int) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.all_books: Sequence[Book] = all_books
        self.page_size = page_size
        self.matches: Sequence[Book] = all_books
        self.current_page = 1

    def reset(self, matches: Sequence[Book]) -> None:
        self.matches, self.current_page = matches, 1

    def next_page(self) -> None:
        self.current_page += 1

    def window(self) -> pagination.PageWindow:
        return pagination.paginate(self.matches, self.current_page, self.page_size)


# ---------------------------------------------------------------------------
# Controller


class CatalogController:
    def __init__(
        self,
        dataset: Dataset,
        presenter: PresentationAdapter,
        page_size: int,
        default_theme: str = "day",
    ) -> None:
        self.books = dataset.books
        self.authors: Dict[str, str] = dataset.authors
        self.genres: Dict[str, str] = dataset.genres
        self.presenter = presenter
        self.default_theme: Theme = normalize_theme(default_theme)
        self.session = BrowseSession(self.books, page_size)

    # -- helpers ----------------------------------------------------------

    def author_name(self, author_id: str) -> str:
        return self.authors.get(author_id, UNKNOWN_AUTHOR)

    def to_card(self, book: Book) -> BookCard:
        return BookCard(
            id=book.id,
            title=book.title,
            author_name=self.author_name(book.author_id),
            image_url=book.image_url,
        )

    def to_cards(self, books: Sequence[Book]) -> List[BookCard]:
        return [self.to_card(b) for b in books]

    def to_details(self, book: Book) -> BookDetails:
        return BookDetails(
            title=book.title,
            author_name=self.author_name(book.author_id),
            year=book.year,
            description=book.description,
            image_url=book.image_url,
        )

    def show_more_button(self) -> ShowMoreButton:
        remaining = self.session.window().remaining
        return ShowMoreButton(remaining=remaining, disabled=remaining <= 0)

    @staticmethod
    def dropdown_options(items: Mapping[str, str], default_label: str) -> List[DropdownOption]:
        options = [DropdownOption(value=ANY, label=default_label)]
        options.extend(DropdownOption(value=k, label=v) for k, v in items.items())
        return options

    def state(self) -> SessionState:
        window = self.session.window()
        return SessionState(
            page=window.page,
            page_size=window.page_size,
            total=window.total,
            visible=self.to_cards(window.visible),
            show_more=self.show_more_button(),
        )

    # -- transitions ------------------------------------------------------

    def start(self) -> None:
        """Render the catalogue as it looks when the page first loads."""
        self.session.reset(self.books)
        self.presenter.populate_dropdown("genre", self.dropdown_options(self.genres, "All Genres"))
        self.presenter.populate_dropdown("author", self.dropdown_options(self.authors, "All Authors"))
        self.presenter.apply_theme(self.default_theme, palette_for(self.default_theme))
        window = self.session.window()
        self.presenter.render_initial_list(self.to_cards(window.visible))
        self.presenter.set_empty_state_visible(window.total == 0)
        self.presenter.set_show_more_affordance(self.show_more_button())

    def search(self, criteria: Union[FilterCriteria, Mapping[str, Any], None]) -> None:
        parsed = coerce_criteria(criteria)
        self.session.reset(filter_books(self.books, parsed))
        window = self.session.window()
        logger.debug("Search %s matched %d of %d books", parsed, window.total, len(self.books))
        self.presenter.set_empty_state_visible(window.total == 0)
        self.presenter.replace_list(self.to_cards(window.visible))
        self.presenter.set_show_more_affordance(self.show_more_button())

    def show_more(self) -> None:
        window = self.session.window()
        if not window.can_show_more:
            logger.debug("Show more ignored on page %d: nothing left", window.page)
            return
        self.session.next_page()
        self.presenter.append_to_list(self.to_cards(window.next_batch))
        self.presenter.set_show_more_affordance(self.show_more_button())

    def open_card(self, book_id: str) -> Optional[Book]:
        book = find_book_by_id(self.books, book_id)
        if book is None:
            logger.debug("No book with id %r; preview skipped", book_id)
            return None
        self.presenter.open_preview(self.to_details(book))
        return book

    def change_theme(self, theme: Any) -> None:
        selected = normalize_theme(theme)
        self.presenter.apply_theme(selected, palette_for(selected))

    def dispatch(self, event: Event) -> None:
        """Apply one user event to the session."""
        if isinstance(event, SearchSubmitted):
            self.search(event.criteria)
        elif isinstance(event, ShowMoreClicked):
            self.show_more()
        elif isinstance(event, CardClicked):
            self.open_card(event.book_id)
        elif isinstance(event, ThemeSubmitted):
            self.change_theme(event.theme)
        else:
            raise TypeError(f"Unsupported catalogue event: {type(event).__name__}")
