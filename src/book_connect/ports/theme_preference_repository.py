from __future__ import annotations

from abc import ABC, abstractmethod


class ThemePreferenceRepository(ABC):
    """
    Port for the single key-value preference store.

    The only persisted state in the system is the reader's theme choice.
    Implementations store opaque string values; parsing belongs to callers.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read a stored preference.

        Args:
            key: Preference name (e.g. "theme")

        Returns:
            The stored value, or None if nothing was stored yet
        """
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
