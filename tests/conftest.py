"""Shared catalog fixtures."""

from __future__ import annotations

import pytest

from book_connect.domain.catalog import Catalog


AUTHORS = {"a1": "Ursula Quill", "a2": "Marcus Penn"}
GENRES = {"g1": "Fantasy", "g2": "Mystery"}


@pytest.fixture()
def raw_books() -> list[dict]:
    """Three records: A(g1, a1), B(g2, a1), C(g1, a2)."""
    return [
        {
            "id": "A",
            "title": "Ashes of Avalon",
            "author": "a1",
            "genres": ["g1"],
            "image": "https://covers.example.org/a.jpg",
            "description": "Dragons, mostly.",
            "published": "1998-03-14T00:00:00.000Z",
        },
        {
            "id": "B",
            "title": "Blackwater Inquest",
            "author": "a1",
            "genres": ["g2"],
            "image": "https://covers.example.org/b.jpg",
            "description": "Who drowned the mayor?",
            "published": "2004-11-02T00:00:00.000Z",
        },
        {
            "id": "C",
            "title": "Crown of Cinders",
            "author": "a2",
            "genres": ["g1"],
            "image": "https://covers.example.org/c.jpg",
            "description": "The sequel nobody expected.",
            "published": "2011-06-30T00:00:00.000Z",
        },
    ]


@pytest.fixture()
def catalog(raw_books: list[dict]) -> Catalog:
    return Catalog.load(raw_books, AUTHORS, GENRES)


@pytest.fixture()
def large_catalog() -> Catalog:
    """Ten books alternating between genres g1 and g2."""
    records = [
        {
            "id": f"book-{i}",
            "title": f"Volume {i}",
            "author": "a1" if i < 5 else "a2",
            "genres": ["g1"] if i % 2 == 0 else ["g2"],
        }
        for i in range(10)
    ]
    return Catalog.load(records, AUTHORS, GENRES)
