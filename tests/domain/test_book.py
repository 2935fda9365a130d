"""Tests for BookRecord and FilterCriteria."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from book_connect.domain.book import ANY, MATCH_ALL, BookRecord, FilterCriteria, Sentinel
from book_connect.domain.errors import FilterValidationError


@pytest.fixture()
def book() -> BookRecord:
    return BookRecord(
        id="A",
        title="The Hobbit",
        author="a1",
        genres=frozenset({"g1", "g3"}),
        published=datetime(1937, 9, 21, tzinfo=timezone.utc),
    )


# ==============================================================================
# BookRecord
# ==============================================================================


def test_book_record_is_immutable(book: BookRecord) -> None:
    with pytest.raises(FrozenInstanceError):
        book.title = "Changed"  # type: ignore[misc]


def test_published_year(book: BookRecord) -> None:
    assert book.published_year == 1937


def test_published_year_absent() -> None:
    assert BookRecord(id="X", title="t", author="a").published_year is None


# ==============================================================================
# Title predicate
# ==============================================================================


def test_match_all_matches_everything(book: BookRecord) -> None:
    assert MATCH_ALL.matches(book)
    assert MATCH_ALL == FilterCriteria(title="", author=ANY, genre=ANY)


def test_title_is_case_insensitive_substring(book: BookRecord) -> None:
    assert FilterCriteria(title="hobb").matches(book)
    assert FilterCriteria(title="THE HOB").matches(book)
    assert not FilterCriteria(title="dragon").matches(book)


def test_title_is_trimmed(book: BookRecord) -> None:
    assert FilterCriteria(title="  hobbit  ").matches(book)


def test_whitespace_title_is_no_constraint(book: BookRecord) -> None:
    assert FilterCriteria(title="   ").matches(book)
    assert FilterCriteria(title="   ").title_query == ""


def test_title_uses_case_folding() -> None:
    book = BookRecord(id="S", title="Die Straße", author="a1")

    assert FilterCriteria(title="STRASSE").matches(book)


# ==============================================================================
# Author and genre predicates
# ==============================================================================


def test_author_exact_match(book: BookRecord) -> None:
    assert FilterCriteria(author="a1").matches(book)
    assert not FilterCriteria(author="a2").matches(book)
    # Keys are exact, not case-insensitive
    assert not FilterCriteria(author="A1").matches(book)


def test_genre_membership(book: BookRecord) -> None:
    assert FilterCriteria(genre="g1").matches(book)
    assert FilterCriteria(genre="g3").matches(book)
    assert not FilterCriteria(genre="g2").matches(book)


def test_predicates_use_and_semantics(book: BookRecord) -> None:
    assert FilterCriteria(title="hobbit", author="a1", genre="g3").matches(book)
    assert not FilterCriteria(title="hobbit", author="a2", genre="g3").matches(book)
    assert not FilterCriteria(title="hobbit", author="a1", genre="g2").matches(book)


def test_literal_any_string_is_a_key_not_the_sentinel(book: BookRecord) -> None:
    """Only the enum member disables a constraint."""
    assert not FilterCriteria(author="any").matches(book)


def test_sentinel_value() -> None:
    assert ANY is Sentinel.ANY
    assert ANY.value == "any"


# ==============================================================================
# Validation
# ==============================================================================


def test_validate_accepts_defaults() -> None:
    MATCH_ALL.validate()


def test_validate_accepts_keys() -> None:
    FilterCriteria(title="x", author="a1", genre="g1").validate()


def test_validate_rejects_blank_author() -> None:
    with pytest.raises(FilterValidationError) as exc_info:
        FilterCriteria(author="  ").validate()

    assert exc_info.value.errors is not None
    assert [e["field"] for e in exc_info.value.errors] == ["author"]


def test_validate_reports_every_invalid_field() -> None:
    with pytest.raises(FilterValidationError) as exc_info:
        FilterCriteria(title=None, author="", genre="").validate()  # type: ignore[arg-type]

    assert [e["field"] for e in exc_info.value.errors or []] == ["title", "author", "genre"]
