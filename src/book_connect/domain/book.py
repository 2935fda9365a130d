from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from book_connect.domain.errors import FilterValidationError


class Sentinel(Enum):
    """Explicit "no constraint" value for reference-key filters."""

    ANY = "any"


ANY = Sentinel.ANY


@dataclass(frozen=True, slots=True)
class BookRecord:
    id: str
    title: str
    author: str  # key into the author table
    genres: frozenset[str] = frozenset()  # keys into the genre table
    image: str = ""
    description: str = ""
    published: datetime | None = None

    @property
    def published_year(self) -> int | None:
        return self.published.year if self.published is not None else None


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    title: str = ""
    author: str | Sentinel = ANY
    genre: str | Sentinel = ANY

    @property
    def title_query(self) -> str:
        """Trimmed, case-folded title needle ("" means no constraint)."""
        return self.title.strip().casefold()

    def matches(self, book: BookRecord) -> bool:
        # AND semantics; each predicate is evaluated independently
        needle = self.title_query
        if needle and needle not in book.title.casefold():
            return False
        if self.author is not ANY and book.author != self.author:
            return False
        if self.genre is not ANY and self.genre not in book.genres:
            return False
        return True

    def validate(self) -> None:
        """
        Validate filter criteria.

        Raises:
            FilterValidationError: If criteria are structurally invalid
        """
        errors: list[dict[str, str]] = []

        if not isinstance(self.title, str):
            errors.append({"field": "title", "message": "Must be a string"})

        for field_name in ("author", "genre"):
            value = getattr(self, field_name)
            if value is ANY:
                continue
            if not isinstance(value, str) or not value.strip():
                errors.append(
                    {
                        "field": field_name,
                        "message": "Must be a non-blank key or the 'any' sentinel",
                    }
                )

        if errors:
            raise FilterValidationError(errors=errors)


MATCH_ALL = FilterCriteria()
