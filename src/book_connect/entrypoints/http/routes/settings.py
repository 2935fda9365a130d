from fastapi import APIRouter, Depends

from book_connect.domain.theme import Theme
from book_connect.entrypoints.http.dependencies import (
    get_apply_theme_use_case,
    get_get_theme_use_case,
)
from book_connect.entrypoints.http.dtos.theme import ThemeResponseDTO, ThemeUpdateDTO
from book_connect.entrypoints.http.error_responses import ErrorResponse
from book_connect.use_cases.theme_preference import ApplyTheme, GetTheme, ThemeResponse


router = APIRouter(prefix="/settings", tags=["Settings"])


def _to_response(result: ThemeResponse) -> ThemeResponseDTO:
    palette = result.palette
    return ThemeResponseDTO(
        theme=result.theme.value,
        color_dark=palette.color_dark,
        color_light=palette.color_light,
    )


@router.get("/theme", response_model=ThemeResponseDTO, summary="Get stored theme")
def get_theme(use_case: GetTheme = Depends(get_get_theme_use_case)) -> ThemeResponseDTO:
    return _to_response(use_case.execute())


@router.put(
    "/theme",
    response_model=ThemeResponseDTO,
    summary="Store theme",
    responses={422: {"model": ErrorResponse, "description": "Unknown theme"}},
)
def put_theme(
    body: ThemeUpdateDTO,
    use_case: ApplyTheme = Depends(get_apply_theme_use_case),
) -> ThemeResponseDTO:
    return _to_response(use_case.execute(Theme.parse(body.theme)))
