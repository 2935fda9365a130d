from __future__ import annotations

from unittest.mock import Mock

from book_connect.adapters.in_memory_theme_preference_repository import (
    InMemoryThemePreferenceRepository,
)
from book_connect.domain.theme import Theme
from book_connect.ports.theme_preference_repository import ThemePreferenceRepository
from book_connect.use_cases.theme_preference import ApplyTheme, GetTheme


def test_get_theme_defaults_to_day() -> None:
    response = GetTheme(InMemoryThemePreferenceRepository()).execute()

    assert response.theme is Theme.DAY
    assert response.palette == Theme.DAY.palette


def test_get_theme_reads_stored_value() -> None:
    repository = InMemoryThemePreferenceRepository({"theme": "night"})

    assert GetTheme(repository).execute().theme is Theme.NIGHT


def test_get_theme_ignores_unknown_stored_value() -> None:
    repository = InMemoryThemePreferenceRepository({"theme": "sepia"})

    assert GetTheme(repository).execute().theme is Theme.DAY


def test_apply_theme_persists_choice() -> None:
    repository = InMemoryThemePreferenceRepository()

    response = ApplyTheme(repository).execute(Theme.NIGHT)

    assert response.theme is Theme.NIGHT
    assert repository.get("theme") == "night"
    assert GetTheme(repository).execute().theme is Theme.NIGHT


def test_apply_theme_writes_through_port() -> None:
    mock_repository = Mock(spec=ThemePreferenceRepository)

    ApplyTheme(mock_repository).execute(Theme.DAY)

    mock_repository.set.assert_called_once_with("theme", "day")
