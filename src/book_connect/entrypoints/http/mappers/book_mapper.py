from __future__ import annotations

import logging

from book_connect.domain.book import ANY, BookRecord, FilterCriteria, Sentinel
from book_connect.domain.catalog import Catalog
from book_connect.domain.errors import UnknownKeyError
from book_connect.entrypoints.http.dtos.books import (
    BookDetailDTO,
    BookListResponseDTO,
    BookPreviewDTO,
    ExpandResponseDTO,
    FilterCriteriaDTO,
    FilterOptionDTO,
)
from book_connect.use_cases.browse_current_page import BrowseCurrentPageResponse
from book_connect.use_cases.expand_list import ExpandListResponse
from book_connect.use_cases.list_filter_options import FilterOption
from book_connect.use_cases.select_record import SelectRecordResponse
from book_connect.use_cases.submit_filter import SubmitFilterRequest, SubmitFilterResponse

logger = logging.getLogger(__name__)


class BookMapper:
    """Maps between REST DTOs and domain models for browsing books."""

    @staticmethod
    def to_reference_key(value: str) -> str | Sentinel:
        """
        Converts a form value to a reference key, turning "any" into the sentinel.

        Args:
            value: Raw select value from the search form

        Returns:
            The ANY sentinel or the key unchanged
        """
        return ANY if value == ANY.value else value

    @staticmethod
    def to_domain_request(dto: FilterCriteriaDTO) -> SubmitFilterRequest:
        return SubmitFilterRequest(
            criteria=FilterCriteria(
                title=dto.title,
                author=BookMapper.to_reference_key(dto.author),
                genre=BookMapper.to_reference_key(dto.genre),
            )
        )

    @staticmethod
    def to_preview(book: BookRecord, catalog: Catalog) -> BookPreviewDTO:
        """
        Converts a BookRecord to a list preview, resolving the author name.

        An unknown author key renders as an empty name.
        """
        try:
            author = catalog.resolve_author_name(book.author)
        except UnknownKeyError:
            logger.warning("Unknown author key", extra={"book_id": book.id, "key": book.author})
            author = ""

        return BookPreviewDTO(id=book.id, title=book.title, author=author, image=book.image)

    @staticmethod
    def to_list_response(
        result: SubmitFilterResponse | BrowseCurrentPageResponse,
        catalog: Catalog,
    ) -> BookListResponseDTO:
        return BookListResponseDTO(
            books=[BookMapper.to_preview(book, catalog) for book in result.books],
            total=result.total_count,
            page=result.page,
            remaining=result.remaining_count,
            is_empty=result.is_empty,
        )

    @staticmethod
    def to_expand_response(result: ExpandListResponse, catalog: Catalog) -> ExpandResponseDTO:
        return ExpandResponseDTO(
            books=[BookMapper.to_preview(book, catalog) for book in result.books],
            page=result.page,
            remaining=result.remaining_count,
        )

    @staticmethod
    def to_detail(result: SelectRecordResponse) -> BookDetailDTO:
        """
        Converts the selected record to its detail view.

        Handles datetime → ISO-8601 string conversion at the boundary.
        """
        book = result.book
        return BookDetailDTO(
            id=book.id,
            title=book.title,
            author=result.author_name,
            subtitle=result.subtitle,
            genres=list(result.genre_names),
            image=book.image,
            description=book.description,
            published=book.published.isoformat() if book.published else None,
        )

    @staticmethod
    def to_options(options: tuple[FilterOption, ...]) -> list[FilterOptionDTO]:
        return [FilterOptionDTO(value=option.value, label=option.label) for option in options]
