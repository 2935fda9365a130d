from fastapi import APIRouter, Depends

from book_connect.domain.query_session import QuerySession
from book_connect.entrypoints.http.dependencies import (
    get_browse_current_page_use_case,
    get_expand_list_use_case,
    get_query_session,
    get_select_record_use_case,
    get_submit_filter_use_case,
)
from book_connect.entrypoints.http.dtos.books import (
    BookDetailDTO,
    BookListResponseDTO,
    ExpandResponseDTO,
    FilterCriteriaDTO,
)
from book_connect.entrypoints.http.error_responses import ErrorResponse
from book_connect.entrypoints.http.mappers.book_mapper import BookMapper
from book_connect.use_cases.browse_current_page import BrowseCurrentPage
from book_connect.use_cases.expand_list import ExpandList
from book_connect.use_cases.select_record import SelectRecord, SelectRecordRequest
from book_connect.use_cases.submit_filter import SubmitFilter


router = APIRouter(tags=["Books"])


@router.get(
    "/books",
    response_model=BookListResponseDTO,
    summary="List rendered books",
    description="Everything rendered so far for the active filter: pages 1 through the current page.",
)
def list_books(
    use_case: BrowseCurrentPage = Depends(get_browse_current_page_use_case),
    session: QuerySession = Depends(get_query_session),
) -> BookListResponseDTO:
    result = use_case.execute()
    return BookMapper.to_list_response(result, session.catalog)


@router.post(
    "/books/search",
    response_model=BookListResponseDTO,
    summary="Apply search filters",
    description="""
    Replace the active filter and restart pagination at page 1.

    ## Filters
    - All filters use AND semantics
    - title: trimmed, case-insensitive substring; blank matches everything
    - author: exact key, or `any`
    - genre: key contained in the book's genres, or `any`

    An empty result is returned with `total = 0`.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def search_books(
    criteria: FilterCriteriaDTO,
    use_case: SubmitFilter = Depends(get_submit_filter_use_case),
    session: QuerySession = Depends(get_query_session),
) -> BookListResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = BookMapper.to_domain_request(criteria)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return BookMapper.to_list_response(result, session.catalog)


@router.post(
    "/books/more",
    response_model=ExpandResponseDTO,
    summary="Show more books",
    description="Reveal the next page of matches. Returns an empty list once nothing remains.",
)
def show_more_books(
    use_case: ExpandList = Depends(get_expand_list_use_case),
    session: QuerySession = Depends(get_query_session),
) -> ExpandResponseDTO:
    result = use_case.execute()
    return BookMapper.to_expand_response(result, session.catalog)


@router.get(
    "/books/{book_id}",
    response_model=BookDetailDTO,
    summary="Get book detail",
    description="Look up a book across the whole catalog, regardless of the active filter.",
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)
def get_book(
    book_id: str,
    use_case: SelectRecord = Depends(get_select_record_use_case),
) -> BookDetailDTO:
    result = use_case.execute(SelectRecordRequest(book_id=book_id))
    return BookMapper.to_detail(result)
