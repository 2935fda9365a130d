"""In-memory book catalog.

The catalog is built once from raw input records and never mutated
afterwards. It owns every ``BookRecord`` and the author/genre lookup tables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from book_connect.domain.book import BookRecord
from book_connect.domain.errors import MalformedRecordError, UnknownKeyError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "title", "author")


class Catalog:
    def __init__(
        self,
        books: Iterable[BookRecord],
        authors: Mapping[str, str],
        genres: Mapping[str, str],
    ) -> None:
        self._books: tuple[BookRecord, ...] = tuple(books)
        self._by_id: dict[str, BookRecord] = {book.id: book for book in self._books}
        self._authors: Mapping[str, str] = MappingProxyType(dict(authors))
        self._genres: Mapping[str, str] = MappingProxyType(dict(genres))

    @classmethod
    def load(
        cls,
        records: Iterable[Mapping[str, Any]],
        authors: Mapping[str, str],
        genres: Mapping[str, str],
    ) -> Catalog:
        """
        Build a catalog from raw records.

        Only the structural shape of each record is checked; author and genre
        keys are trusted to resolve in their tables.

        Args:
            records: Raw book mappings in display order
            authors: Author key -> display name
            genres: Genre key -> display name

        Returns:
            Catalog holding the parsed records in load order

        Raises:
            MalformedRecordError: If a record lacks a required field, repeats an
                id, or carries an unparseable publication timestamp
        """
        books: list[BookRecord] = []
        seen: set[str] = set()

        for index, raw in enumerate(records):
            book = _parse_record(index, raw)
            if book.id in seen:
                raise MalformedRecordError(
                    f"Duplicate book id '{book.id}'", index=index, field="id"
                )
            seen.add(book.id)
            books.append(book)

        logger.info(
            "Catalog loaded",
            extra={"books": len(books), "authors": len(authors), "genres": len(genres)},
        )
        return cls(books, authors, genres)

    def all_records(self) -> tuple[BookRecord, ...]:
        return self._books

    def get(self, book_id: str) -> BookRecord | None:
        return self._by_id.get(book_id)

    def resolve_author_name(self, key: str) -> str:
        try:
            return self._authors[key]
        except KeyError:
            raise UnknownKeyError("author", key) from None

    def resolve_genre_name(self, key: str) -> str:
        try:
            return self._genres[key]
        except KeyError:
            raise UnknownKeyError("genre", key) from None

    def authors(self) -> Mapping[str, str]:
        return self._authors

    def genres(self) -> Mapping[str, str]:
        return self._genres

    def __len__(self) -> int:
        return len(self._books)


def _parse_record(index: int, raw: Mapping[str, Any]) -> BookRecord:
    if not isinstance(raw, Mapping):
        raise MalformedRecordError(f"Record at index {index} is not an object", index=index)

    for field_name in REQUIRED_FIELDS:
        if raw.get(field_name) in (None, ""):
            raise MalformedRecordError(
                f"Record at index {index} is missing required field '{field_name}'",
                index=index,
                field=field_name,
            )

    genres = raw.get("genres") or ()
    if isinstance(genres, str) or not isinstance(genres, Iterable):
        raise MalformedRecordError(
            f"Record at index {index} has non-list 'genres'", index=index, field="genres"
        )

    return BookRecord(
        id=str(raw["id"]),
        title=str(raw["title"]),
        author=str(raw["author"]),
        genres=frozenset(str(genre) for genre in genres),
        image=str(raw.get("image") or ""),
        description=str(raw.get("description") or ""),
        published=_parse_published(index, raw.get("published")),
    )


def _parse_published(index: int, value: Any) -> datetime | None:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    try:
        # fromisoformat() accepts a trailing "Z" from Python 3.11 on
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise MalformedRecordError(
            f"Record at index {index} has an invalid 'published' timestamp",
            index=index,
            field="published",
        ) from None
