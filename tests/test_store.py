"""Tests for loading the catalogue file."""

import json
import logging

from bookconnect.catalog.store import DATA_FILE, load_dataset


def write(tmp_path, content):
    path = tmp_path / "books.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
    return path


def test_packaged_catalogue_loads():
    dataset = load_dataset()

    assert DATA_FILE.exists()
    assert len(dataset.books) > 0
    for book in dataset.books:
        assert book.author_id in dataset.authors
        assert all(g in dataset.genres for g in book.genre_ids)


def test_loads_books_with_file_keys(tmp_path):
    path = write(
        tmp_path,
        {
            "authors": {"a1": "Frank Herbert"},
            "genres": {"sf": "Science Fiction"},
            "books": [
                {
                    "id": "1",
                    "title": "Dune",
                    "author": "a1",
                    "genres": ["sf"],
                    "image": "https://example.com/dune.jpg",
                    "description": "Spice.",
                    "published": "1965-08-01T00:00:00.000Z",
                }
            ],
        },
    )

    dataset = load_dataset(path)

    (book,) = dataset.books
    assert book.author_id == "a1"
    assert book.genre_ids == ["sf"]
    assert book.image_url == "https://example.com/dune.jpg"
    assert book.year == 1965
    assert dataset.authors == {"a1": "Frank Herbert"}


def test_missing_file_gives_empty_catalogue(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        dataset = load_dataset(tmp_path / "nope.json")

    assert dataset.books == []
    assert dataset.authors == {}
    assert "Could not read catalogue" in caplog.text


def test_malformed_json_gives_empty_catalogue(tmp_path):
    assert load_dataset(write(tmp_path, "{not json")).books == []


def test_top_level_must_be_object(tmp_path):
    assert load_dataset(write(tmp_path, [1, 2, 3])).books == []


def test_invalid_book_entries_are_skipped(tmp_path, caplog):
    path = write(
        tmp_path,
        {
            "books": [
                {"id": "1", "title": "No date", "author": "a1"},
                {"id": "2", "title": "Fine", "author": "a1", "published": "2001-01-01T00:00:00Z"},
            ]
        },
    )

    with caplog.at_level(logging.WARNING):
        dataset = load_dataset(path)

    assert [b.id for b in dataset.books] == ["2"]
    assert "Skipping book #0" in caplog.text


def test_registries_of_wrong_type_are_ignored(tmp_path):
    dataset = load_dataset(write(tmp_path, {"authors": ["x"], "genres": None, "books": []}))

    assert dataset.authors == {}
    assert dataset.genres == {}
