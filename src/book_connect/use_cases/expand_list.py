from __future__ import annotations

import logging
from dataclasses import dataclass

from book_connect.domain.book import BookRecord
from book_connect.domain.query_session import QuerySession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExpandListResponse:
    books: tuple[BookRecord, ...]  # Only the newly revealed slice
    remaining_count: int
    page: int


class ExpandList:
    """
    Reveal the next page of matches ("Show more").

    Hosts are expected to disable the affordance once ``remaining_count``
    reaches zero. A request past the end still succeeds with an empty slice.
    """

    def __init__(self, session: QuerySession) -> None:
        self._session = session

    def execute(self) -> ExpandListResponse:
        with self._session.locked():
            if self._session.remaining_count() == 0:
                logger.debug("Expansion requested with no remaining matches")

            books = self._session.advance_page()

            return ExpandListResponse(
                books=books,
                remaining_count=self._session.remaining_count(),
                page=self._session.page,
            )
