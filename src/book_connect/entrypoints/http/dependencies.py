"""
Dependency injection for FastAPI routes.

Key principle: the QuerySession is built once per app and lives on
``app.state``; database sessions are per-request and never cached.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from book_connect.adapters.sql_theme_preference_repository import SqlThemePreferenceRepository
from book_connect.domain.errors import InternalError
from book_connect.domain.query_session import QuerySession
from book_connect.infra.db.session import get_session
from book_connect.ports.theme_preference_repository import ThemePreferenceRepository
from book_connect.use_cases.browse_current_page import BrowseCurrentPage
from book_connect.use_cases.expand_list import ExpandList
from book_connect.use_cases.list_filter_options import ListFilterOptions
from book_connect.use_cases.select_record import SelectRecord
from book_connect.use_cases.submit_filter import SubmitFilter
from book_connect.use_cases.theme_preference import ApplyTheme, GetTheme


def get_query_session(request: Request) -> QuerySession:
    """
    Returns the QuerySession owned by the running application.

    Raises:
        InternalError: If the application started without a catalog
    """
    session = getattr(request.app.state, "query_session", None)
    if session is None:
        raise InternalError("Query session is not initialized")
    return session


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_theme_repository(db: Session = Depends(get_db)) -> ThemePreferenceRepository:
    return SqlThemePreferenceRepository(session=db)


def get_submit_filter_use_case(
    session: QuerySession = Depends(get_query_session),
) -> SubmitFilter:
    return SubmitFilter(session)


def get_browse_current_page_use_case(
    session: QuerySession = Depends(get_query_session),
) -> BrowseCurrentPage:
    return BrowseCurrentPage(session)


def get_expand_list_use_case(
    session: QuerySession = Depends(get_query_session),
) -> ExpandList:
    return ExpandList(session)


def get_select_record_use_case(
    session: QuerySession = Depends(get_query_session),
) -> SelectRecord:
    return SelectRecord(session)


def get_list_filter_options_use_case(
    session: QuerySession = Depends(get_query_session),
) -> ListFilterOptions:
    return ListFilterOptions(session.catalog)


def get_get_theme_use_case(
    repository: ThemePreferenceRepository = Depends(get_theme_repository),
) -> GetTheme:
    return GetTheme(repository)


def get_apply_theme_use_case(
    repository: ThemePreferenceRepository = Depends(get_theme_repository),
) -> ApplyTheme:
    return ApplyTheme(repository)
