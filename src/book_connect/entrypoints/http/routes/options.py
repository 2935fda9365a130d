from fastapi import APIRouter, Depends

from book_connect.entrypoints.http.dependencies import get_list_filter_options_use_case
from book_connect.entrypoints.http.dtos.books import FilterOptionDTO
from book_connect.entrypoints.http.mappers.book_mapper import BookMapper
from book_connect.use_cases.list_filter_options import ListFilterOptions


router = APIRouter(tags=["Filter options"])


@router.get(
    "/authors",
    response_model=list[FilterOptionDTO],
    summary="Author dropdown options",
)
def list_authors(
    use_case: ListFilterOptions = Depends(get_list_filter_options_use_case),
) -> list[FilterOptionDTO]:
    return BookMapper.to_options(use_case.execute().authors)


@router.get(
    "/genres",
    response_model=list[FilterOptionDTO],
    summary="Genre dropdown options",
)
def list_genres(
    use_case: ListFilterOptions = Depends(get_list_filter_options_use_case),
) -> list[FilterOptionDTO]:
    return BookMapper.to_options(use_case.execute().genres)
