from __future__ import annotations

import logging
from dataclasses import dataclass

from book_connect.domain.theme import DEFAULT_THEME, THEME_PREFERENCE_KEY, Theme, ThemePalette
from book_connect.ports.theme_preference_repository import ThemePreferenceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ThemeResponse:
    theme: Theme

    @property
    def palette(self) -> ThemePalette:
        return self.theme.palette


class GetTheme:
    """Read the stored theme, falling back to day mode."""

    def __init__(self, repository: ThemePreferenceRepository) -> None:
        self._repository = repository

    def execute(self) -> ThemeResponse:
        stored = self._repository.get(THEME_PREFERENCE_KEY)

        if stored is None:
            return ThemeResponse(theme=DEFAULT_THEME)

        try:
            theme = Theme(stored)
        except ValueError:
            logger.warning("Ignoring unknown stored theme", extra={"stored": stored})
            theme = DEFAULT_THEME

        return ThemeResponse(theme=theme)


class ApplyTheme:
    """Persist a theme choice and return its palette."""

    def __init__(self, repository: ThemePreferenceRepository) -> None:
        self._repository = repository

    def execute(self, theme: Theme) -> ThemeResponse:
        self._repository.set(THEME_PREFERENCE_KEY, theme.value)
        logger.info("Theme applied", extra={"theme": theme.value})
        return ThemeResponse(theme=theme)
