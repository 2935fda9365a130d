from pydantic import BaseModel, ConfigDict, Field


class BookPreviewDTO(BaseModel):
    """List entry: enough to render a preview button."""

    id: str
    title: str
    author: str  # Resolved display name
    image: str


class BookDetailDTO(BaseModel):
    id: str
    title: str
    author: str
    subtitle: str
    genres: list[str]
    image: str
    description: str
    published: str | None  # ISO-8601


class FilterCriteriaDTO(BaseModel):
    """Search form submission."""

    title: str = Field(
        default="",
        description="Case-insensitive substring of the title (blank = no constraint)",
        examples=["dragon"],
        max_length=200,
    )
    author: str = Field(
        default="any",
        description="Author key, or 'any' for no constraint",
        examples=["any"],
        min_length=1,
    )
    genre: str = Field(
        default="any",
        description="Genre key, or 'any' for no constraint",
        examples=["any"],
        min_length=1,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "dragon",
                "author": "any",
                "genre": "any",
            }
        }
    )


class BookListResponseDTO(BaseModel):
    books: list[BookPreviewDTO]
    total: int
    page: int
    remaining: int
    is_empty: bool  # Drives the "no results" message


class ExpandResponseDTO(BaseModel):
    books: list[BookPreviewDTO]  # Only the newly revealed books
    page: int
    remaining: int


class FilterOptionDTO(BaseModel):
    value: str
    label: str
