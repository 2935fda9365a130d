from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from book_connect.domain.book import ANY
from book_connect.domain.catalog import Catalog

ALL_AUTHORS_LABEL = "All Authors"
ALL_GENRES_LABEL = "All Genres"


@dataclass(frozen=True, slots=True)
class FilterOption:
    value: str
    label: str


@dataclass(frozen=True, slots=True)
class ListFilterOptionsResponse:
    authors: tuple[FilterOption, ...]
    genres: tuple[FilterOption, ...]


class ListFilterOptions:
    """Dropdown options for the search form, each list headed by the "any" option."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def execute(self) -> ListFilterOptionsResponse:
        return ListFilterOptionsResponse(
            authors=_options(self._catalog.authors(), ALL_AUTHORS_LABEL),
            genres=_options(self._catalog.genres(), ALL_GENRES_LABEL),
        )


def _options(table: Mapping[str, str], any_label: str) -> tuple[FilterOption, ...]:
    return (FilterOption(value=ANY.value, label=any_label),) + tuple(
        FilterOption(value=key, label=name) for key, name in table.items()
    )
