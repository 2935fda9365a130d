"""Filter and pagination state for one browsing session."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from book_connect.domain.book import MATCH_ALL, BookRecord, FilterCriteria
from book_connect.domain.catalog import Catalog
from book_connect.domain.errors import PagingValidationError

logger = logging.getLogger(__name__)


class QuerySession:
    """
    Active filter, match set and pagination cursor over a Catalog.

    - Matches keep catalog order and reference the catalog's records
    - ``page`` is 1-based and is reset to 1 by every ``apply_filter``
    - ``advance_page`` past the end returns an empty slice and still
      increments ``page``; hosts guard with ``remaining_count``

    All state changes happen under a single re-entrant lock. Hosts running
    handlers on a thread pool hold ``locked()`` around a sequence of calls
    to read criteria, matches and page as one consistent snapshot.
    """

    def __init__(self, catalog: Catalog, page_size: int) -> None:
        if page_size < 1:
            raise PagingValidationError("page_size must be >= 1")

        self._catalog = catalog
        self._page_size = page_size
        self._lock = threading.RLock()

        self._criteria: FilterCriteria = MATCH_ALL
        self._matches: tuple[BookRecord, ...] = catalog.all_records()
        self._page = 1

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the session lock across several calls."""
        with self._lock:
            yield

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def matches(self) -> tuple[BookRecord, ...]:
        with self._lock:
            return self._matches

    @property
    def page(self) -> int:
        with self._lock:
            return self._page

    def apply_filter(self, criteria: FilterCriteria) -> tuple[BookRecord, ...]:
        """
        Recompute the match set and restart pagination.

        An empty result is a valid state, not an error.

        Args:
            criteria: Title/author/genre filter (AND semantics)

        Returns:
            The new match set in catalog order
        """
        matches = tuple(
            book for book in self._catalog.all_records() if criteria.matches(book)
        )

        with self._lock:
            self._criteria = criteria
            self._matches = matches
            self._page = 1

        logger.debug(
            "Filter applied",
            extra={
                "title": criteria.title,
                "author": str(criteria.author),
                "genre": str(criteria.genre),
                "matches": len(matches),
            },
        )
        return matches

    def current_slice(self) -> tuple[BookRecord, ...]:
        """Everything rendered so far: ``matches[0 : page * page_size]``."""
        with self._lock:
            return self._matches[: self._page * self._page_size]

    def advance_page(self) -> tuple[BookRecord, ...]:
        """Return the next unseen slice, then move the cursor forward by one page."""
        with self._lock:
            start = self._page * self._page_size
            next_slice = self._matches[start : start + self._page_size]
            self._page += 1
            return next_slice

    def remaining_count(self) -> int:
        with self._lock:
            return max(0, len(self._matches) - self._page * self._page_size)

    def find_by_id(self, book_id: str) -> BookRecord | None:
        """Look up a record in the full catalog, ignoring the active filter."""
        return self._catalog.get(book_id)
