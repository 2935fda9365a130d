from __future__ import annotations

from dataclasses import dataclass

from book_connect.domain.book import BookRecord
from book_connect.domain.query_session import QuerySession


@dataclass(frozen=True, slots=True)
class BrowseCurrentPageResponse:
    books: tuple[BookRecord, ...]
    total_count: int
    remaining_count: int
    page: int

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0


class BrowseCurrentPage:
    """Everything rendered so far for the active filter (initial render)."""

    def __init__(self, session: QuerySession) -> None:
        self._session = session

    def execute(self) -> BrowseCurrentPageResponse:
        with self._session.locked():
            return BrowseCurrentPageResponse(
                books=self._session.current_slice(),
                total_count=len(self._session.matches),
                remaining_count=self._session.remaining_count(),
                page=self._session.page,
            )
