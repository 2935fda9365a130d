from __future__ import annotations

from book_connect.ports.theme_preference_repository import ThemePreferenceRepository


class InMemoryThemePreferenceRepository(ThemePreferenceRepository):
    """
    Canonical contract implementation for tests.

    - Last write wins
    - Missing keys read as None
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
