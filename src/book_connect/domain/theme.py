from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from book_connect.domain.errors import ValidationError

THEME_PREFERENCE_KEY = "theme"

_DARK_RGB = "10, 10, 20"
_LIGHT_RGB = "255, 255, 255"


@dataclass(frozen=True, slots=True)
class ThemePalette:
    color_dark: str
    color_light: str


class Theme(str, Enum):
    DAY = "day"
    NIGHT = "night"

    @classmethod
    def parse(cls, value: str) -> Theme:
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValidationError(
                errors=[
                    {
                        "field": "theme",
                        "message": f"Must be one of: {', '.join(t.value for t in cls)}",
                        "code": "INVALID_THEME",
                    }
                ]
            ) from None

    @property
    def palette(self) -> ThemePalette:
        # Night mode swaps the two CSS colour variables
        if self is Theme.NIGHT:
            return ThemePalette(color_dark=_LIGHT_RGB, color_light=_DARK_RGB)
        return ThemePalette(color_dark=_DARK_RGB, color_light=_LIGHT_RGB)


DEFAULT_THEME = Theme.DAY
