"""Select record use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from book_connect.domain.book import BookRecord
from book_connect.domain.errors import NotFoundError, UnknownKeyError, ValidationError
from book_connect.domain.query_session import QuerySession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectRecordRequest:
    """Request to open the detail view of a book."""

    book_id: str


@dataclass(frozen=True, slots=True)
class SelectRecordResponse:
    """Detail view of the selected book."""

    book: BookRecord
    author_name: str
    genre_names: tuple[str, ...]

    @property
    def subtitle(self) -> str:
        """Author and publication year, e.g. ``"Jane Doe (1999)"``."""
        year = self.book.published_year
        return f"{self.author_name} ({year})" if year is not None else self.author_name


class SelectRecord:
    """
    Use case for opening the detail view of a single book.

    Responsibilities:
    - Validate book_id is not blank
    - Look the book up across the full catalog (ignores the active filter)
    - Raise NotFoundError if the book doesn't exist
    - Resolve display names; unknown keys degrade to an empty name
    """

    def __init__(self, session: QuerySession) -> None:
        """
        Initialize use case with dependencies.

        Args:
            session: Query session whose catalog is searched
        """
        self._session = session

    def execute(self, request: SelectRecordRequest) -> SelectRecordResponse:
        """
        Execute the select record use case.

        Args:
            request: Request containing book_id

        Returns:
            SelectRecordResponse with the book and resolved names

        Raises:
            ValidationError: If book_id is blank
            NotFoundError: If no book carries the given id
        """
        if not request.book_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "book_id",
                        "message": "Must not be blank",
                        "code": "BLANK_ID",
                    }
                ]
            )

        book = self._session.find_by_id(request.book_id)

        if book is None:
            raise NotFoundError(resource="Book", identifier=request.book_id)

        catalog = self._session.catalog
        author_name = _resolve_or_empty(catalog.resolve_author_name, book.author, book.id)
        genre_names = tuple(
            name
            for name in (
                _resolve_or_empty(catalog.resolve_genre_name, genre, book.id)
                for genre in sorted(book.genres)
            )
            if name
        )

        return SelectRecordResponse(book=book, author_name=author_name, genre_names=genre_names)


def _resolve_or_empty(resolve: Callable[[str], str], key: str, book_id: str) -> str:
    try:
        return resolve(key)
    except UnknownKeyError as exc:
        logger.warning(
            "Unresolvable reference key",
            extra={"book_id": book_id, **exc.context},
        )
        return ""
