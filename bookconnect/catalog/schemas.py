"""
Pydantic schema definitions for the catalog module.

``Book`` mirrors one entry of the dataset file. Its aliases are the
keys used on disk (``author``, ``image``, ``published``, ``genres``)
while the attribute names say what the values are. ``FilterCriteria``
is what the search form submits; the ``"any"`` sentinel the form uses
for "no constraint" becomes ``None`` on the way in, so nothing past
this module compares against magic strings.

The remaining models are the payloads handed to the presentation
layer: the card shown in the list, the preview details, the state of
the "show more" button and the recorded directives themselves.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Value the search form sends for "no constraint on this field".
ANY = "any"


class Book(BaseModel):
    """A single catalogue entry. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    author_id: str = Field(alias="author")
    image_url: str = Field(default="", alias="image")
    description: str = ""
    published_date: datetime = Field(alias="published")
    genre_ids: List[str] = Field(default_factory=list, alias="genres")

    @property
    def year(self) -> int:
        return self.published_date.year


class Dataset(BaseModel):
    """Everything the catalogue is built from, as loaded at startup."""

    books: List[Book] = Field(default_factory=list)
    authors: Dict[str, str] = Field(default_factory=dict)
    genres: Dict[str, str] = Field(default_factory=dict)


class FilterCriteria(BaseModel):
    """Search form values.

    ``author_id`` and ``genre_id`` are ``None`` when the field carries no
    constraint. The form layer may send ``"any"``, an empty string,
    ``null`` or leave the field out entirely; all of these mean the
    same thing. A missing title is an empty query.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title_query: str = Field(default="", alias="title")
    author_id: Optional[str] = Field(default=None, alias="author")
    genre_id: Optional[str] = Field(default=None, alias="genre")

    @field_validator("title_query", mode="before")
    @classmethod
    def _default_title(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("author_id", "genre_id", mode="before")
    @classmethod
    def _any_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str) and value.strip() in ("", ANY):
            return None
        return value

    def is_empty(self) -> bool:
        """Return True when the criteria would keep every book."""
        return (
            not self.title_query.strip()
            and self.author_id is None
            and self.genre_id is None
        )


class BookCard(BaseModel):
    """What one entry of the book list shows."""

    id: str
    title: str
    author_name: str
    image_url: str = ""


class BookDetails(BaseModel):
    """Fields of the preview overlay for a single book."""

    title: str
    author_name: str
    year: int
    description: str = ""
    image_url: str = ""

    @property
    def subtitle(self) -> str:
        return f"{self.author_name} ({self.year})"


class ShowMoreButton(BaseModel):
    remaining: int
    disabled: bool

    @property
    def label(self) -> str:
        return f"Show more ({self.remaining})"


class DropdownOption(BaseModel):
    value: str
    label: str


class Directive(BaseModel):
    """One rendering instruction for the presentation layer.

    ``action`` is the adapter method that was called and ``payload`` its
    arguments, already converted to JSON-friendly values.
    """

    action: str
    payload: Dict[str, Any] = Field(default_factory=dict)


class SessionState(BaseModel):
    """A read-only snapshot of the browse session."""

    page: int
    page_size: int
    total: int
    visible: List[BookCard]
    show_more: ShowMoreButton
