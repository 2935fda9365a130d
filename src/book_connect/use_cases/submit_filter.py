from __future__ import annotations

from dataclasses import dataclass

from book_connect.domain.book import BookRecord, FilterCriteria
from book_connect.domain.query_session import QuerySession


@dataclass(frozen=True, slots=True)
class SubmitFilterRequest:
    criteria: FilterCriteria


@dataclass(frozen=True, slots=True)
class SubmitFilterResponse:
    books: tuple[BookRecord, ...]  # First page of the new match set
    total_count: int
    remaining_count: int
    page: int

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0


class SubmitFilter:
    """
    Apply new filter criteria to the session.

    Validates criteria, recomputes the match set and restarts pagination.
    The response carries the first page to render.
    """

    def __init__(self, session: QuerySession) -> None:
        self._session = session

    def execute(self, request: SubmitFilterRequest) -> SubmitFilterResponse:
        """
        Execute filter submission.

        Args:
            request: Filter criteria built at the host boundary

        Returns:
            Response with the first page and pagination counters

        Raises:
            FilterValidationError: If criteria are invalid
        """
        request.criteria.validate()

        with self._session.locked():
            matches = self._session.apply_filter(request.criteria)

            return SubmitFilterResponse(
                books=self._session.current_slice(),
                total_count=len(matches),
                remaining_count=self._session.remaining_count(),
                page=self._session.page,
            )
