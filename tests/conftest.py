"""Shared fixtures for the catalogue tests."""

import pytest
from fastapi.testclient import TestClient

from bookconnect.catalog.controller import CatalogController
from bookconnect.catalog.presenter import DirectiveRecorder
from bookconnect.catalog.router import Catalog, get_catalog
from bookconnect.catalog.schemas import Book, Dataset
from bookconnect.main import app


def make_book(book_id, title, author="a1", genres=("sf",), published="2000-01-01T00:00:00Z"):
    return Book(
        id=book_id,
        title=title,
        author_id=author,
        image_url=f"https://example.com/{book_id}.jpg",
        description=f"About {title}",
        published_date=published,
        genre_ids=list(genres),
    )


@pytest.fixture
def scenario_books():
    """The two-book catalogue used in the search scenario."""
    return [
        make_book("1", "Dune", author="a1", genres=["sf"], published="1965-08-01T00:00:00Z"),
        make_book("2", "Hobbit", author="a2", genres=["fantasy"], published="1937-09-21T00:00:00Z"),
    ]


@pytest.fixture
def books():
    """Seven books across three authors and three genres."""
    return [
        make_book("1", "Dune", author="a1", genres=["sf"]),
        make_book("2", "The Hobbit", author="a2", genres=["fantasy", "adventure"]),
        make_book("3", "Dune Messiah", author="a1", genres=["sf"]),
        make_book("4", "The Silmarillion", author="a2", genres=["fantasy"]),
        make_book("5", "Children of Dune", author="a1", genres=["sf", "adventure"]),
        make_book("6", "Dracula", author="a3", genres=["horror"]),
        make_book("7", "The Lord of the Rings", author="a2", genres=["fantasy", "adventure"]),
    ]


@pytest.fixture
def dataset(books):
    return Dataset(
        books=books,
        authors={"a1": "Frank Herbert", "a2": "J. R. R. Tolkien", "a3": "Bram Stoker"},
        genres={"sf": "Science Fiction", "fantasy": "Fantasy", "adventure": "Adventure", "horror": "Horror"},
    )


@pytest.fixture
def recorder():
    return DirectiveRecorder()


@pytest.fixture
def make_controller(dataset, recorder):
    def _make(page_size=2, data=None, default_theme="day"):
        return CatalogController(data if data is not None else dataset, recorder, page_size=page_size, default_theme=default_theme)

    return _make


@pytest.fixture
def client(make_controller, recorder):
    """Test client bound to a fresh catalogue with a page size of 2."""
    catalog = Catalog(make_controller(page_size=2), recorder)
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
