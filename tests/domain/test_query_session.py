"""
Test suite for QuerySession.

Covers filter correctness, order preservation, pagination reset and
exhaustion, remaining-count bounds and id lookups.
"""

from __future__ import annotations

import itertools

import pytest

from book_connect.domain.book import ANY, FilterCriteria
from book_connect.domain.catalog import Catalog
from book_connect.domain.errors import PagingValidationError
from book_connect.domain.query_session import QuerySession


def ids(books) -> list[str]:
    return [book.id for book in books]


# ==============================================================================
# Initial state
# ==============================================================================


def test_initial_state_matches_everything(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)

    assert session.page == 1
    assert session.criteria == FilterCriteria()
    assert ids(session.matches) == ["A", "B", "C"]
    assert ids(session.current_slice()) == ["A", "B"]
    assert session.remaining_count() == 1


@pytest.mark.parametrize("page_size", [0, -1])
def test_rejects_non_positive_page_size(catalog: Catalog, page_size: int) -> None:
    with pytest.raises(PagingValidationError):
        QuerySession(catalog, page_size=page_size)


# ==============================================================================
# Reference scenario (page size 2)
# ==============================================================================


def test_reference_scenario(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)

    matches = session.apply_filter(FilterCriteria(title="", author=ANY, genre="g1"))
    assert ids(matches) == ["A", "C"]
    assert session.page == 1

    assert ids(session.current_slice()) == ["A", "C"]
    assert session.remaining_count() == 0

    assert session.advance_page() == ()
    assert session.page == 2

    matches = session.apply_filter(FilterCriteria(title="b", author=ANY, genre=ANY))
    assert ids(matches) == ["B"]
    assert session.page == 1

    assert session.find_by_id("Z") is None


# ==============================================================================
# Filtering
# ==============================================================================


def test_filter_by_author(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=10)

    assert ids(session.apply_filter(FilterCriteria(author="a1"))) == ["A", "B"]


def test_filter_combines_predicates(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=10)

    assert ids(session.apply_filter(FilterCriteria(author="a1", genre="g1"))) == ["A"]


def test_filter_with_no_matches_is_valid(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)

    matches = session.apply_filter(FilterCriteria(title="zzz"))

    assert matches == ()
    assert session.current_slice() == ()
    assert session.remaining_count() == 0


def test_filter_returns_catalog_records_not_copies(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)

    matches = session.apply_filter(FilterCriteria(genre="g1"))

    assert matches[0] is catalog.all_records()[0]


def test_filter_stores_criteria(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)
    criteria = FilterCriteria(title="crown")

    session.apply_filter(criteria)

    assert session.criteria is criteria


def test_filter_correctness_for_all_criteria(catalog: Catalog) -> None:
    """A record matches iff all three predicates hold, in catalog order."""
    session = QuerySession(catalog, page_size=2)
    titles = ["", "  ", "a", "OF", "inquest", "nothing"]
    authors = [ANY, "a1", "a2", "a3"]
    genres = [ANY, "g1", "g2", "g3"]

    for title, author, genre in itertools.product(titles, authors, genres):
        criteria = FilterCriteria(title=title, author=author, genre=genre)
        needle = title.strip().lower()
        expected = [
            book.id
            for book in catalog.all_records()
            if (not needle or needle in book.title.lower())
            and (author is ANY or book.author == author)
            and (genre is ANY or genre in book.genres)
        ]

        assert ids(session.apply_filter(criteria)) == expected, criteria


# ==============================================================================
# Pagination
# ==============================================================================


def test_apply_filter_resets_page(large_catalog: Catalog) -> None:
    session = QuerySession(large_catalog, page_size=3)
    session.advance_page()
    session.advance_page()
    assert session.page == 3

    session.apply_filter(FilterCriteria())

    assert session.page == 1
    assert ids(session.current_slice()) == ["book-0", "book-1", "book-2"]


def test_advance_page_returns_only_next_slice(large_catalog: Catalog) -> None:
    session = QuerySession(large_catalog, page_size=3)

    assert ids(session.advance_page()) == ["book-3", "book-4", "book-5"]
    assert session.page == 2
    assert ids(session.current_slice()) == [f"book-{i}" for i in range(6)]
    assert session.remaining_count() == 4


def test_pagination_exhaustion_covers_matches_exactly(large_catalog: Catalog) -> None:
    session = QuerySession(large_catalog, page_size=3)

    chunks = [session.current_slice()]
    while session.remaining_count() > 0:
        chunks.append(session.advance_page())

    assert [len(chunk) for chunk in chunks] == [3, 3, 3, 1]
    assert list(itertools.chain.from_iterable(chunks)) == list(session.matches)


def test_pagination_exhaustion_after_filter(large_catalog: Catalog) -> None:
    session = QuerySession(large_catalog, page_size=2)
    session.apply_filter(FilterCriteria(genre="g1"))

    seen = list(session.current_slice())
    while session.remaining_count() > 0:
        seen.extend(session.advance_page())

    assert ids(seen) == ["book-0", "book-2", "book-4", "book-6", "book-8"]


def test_advance_past_end_returns_empty_and_increments(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)
    assert ids(session.advance_page()) == ["C"]

    assert session.advance_page() == ()
    assert session.advance_page() == ()
    assert session.page == 4
    assert session.remaining_count() == 0
    # Everything is still reported as rendered
    assert ids(session.current_slice()) == ["A", "B", "C"]


def test_remaining_count_never_negative(large_catalog: Catalog) -> None:
    session = QuerySession(large_catalog, page_size=4)

    for _ in range(6):
        assert session.remaining_count() >= 0
        session.advance_page()

    session.apply_filter(FilterCriteria(title="no such title"))
    assert session.remaining_count() == 0


# ==============================================================================
# Lookup
# ==============================================================================


def test_find_by_id_ignores_active_filter(catalog: Catalog) -> None:
    session = QuerySession(catalog, page_size=2)
    session.apply_filter(FilterCriteria(genre="g2"))

    book = session.find_by_id("C")

    assert book is not None
    assert book.title == "Crown of Cinders"


def test_find_by_id_missing(catalog: Catalog) -> None:
    assert QuerySession(catalog, page_size=2).find_by_id("missing") is None
