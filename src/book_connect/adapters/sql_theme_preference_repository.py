"""SQLAlchemy implementation of ThemePreferenceRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from book_connect.infra.db.models.preference import PreferenceRow
from book_connect.ports.theme_preference_repository import ThemePreferenceRepository


class SqlThemePreferenceRepository(ThemePreferenceRepository):
    """
    SQL implementation of ThemePreferenceRepository.

    - One row per preference key in the ``preferences`` table
    - Writes are upserts keyed by primary key (``Session.merge``)
    - Commit/rollback is owned by the session provider, not the repository
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def get(self, key: str) -> str | None:
        query = select(PreferenceRow.value).where(PreferenceRow.key == key)
        return self._session.execute(query).scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        self._session.merge(PreferenceRow(key=key, value=value))
        self._session.flush()
