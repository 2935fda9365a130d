from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from book_connect.domain.catalog import Catalog
from book_connect.domain.query_session import QuerySession
from book_connect.entrypoints.http.exception_handlers import register_exception_handlers
from book_connect.entrypoints.http.routes.books import router as books_router
from book_connect.entrypoints.http.routes.health import router as health_router
from book_connect.entrypoints.http.routes.options import router as options_router
from book_connect.entrypoints.http.routes.settings import router as settings_router
from book_connect.infra.catalog_file import load_catalog_file
from book_connect.infra.config import books_per_page, catalog_path

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _load_catalog_on_startup(app: FastAPI) -> AsyncIterator[None]:
    # Load failures are fatal: let them abort startup
    if getattr(app.state, "query_session", None) is None:
        catalog = load_catalog_file(catalog_path())
        page_size = app.state.page_size
        if page_size is None:
            page_size = books_per_page()
        app.state.query_session = QuerySession(catalog, page_size=page_size)
        logger.info("Query session ready", extra={"books": len(catalog), "page_size": page_size})
    yield


def build_app(catalog: Catalog | None = None, page_size: int | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        catalog: Preloaded catalog. When omitted, the catalog is read from
            CATALOG_PATH during application startup.
        page_size: Books per page; defaults to BOOKS_PER_PAGE.
    """
    app = FastAPI(
        title="Book Connect API",
        description="""
        Catalog browser API for filtering, paging through and inspecting books.

        ## Features
        - Filter the catalog by title, author and genre
        - Incremental "show more" pagination
        - Book details
        - Persisted day/night theme preference

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=_load_catalog_on_startup,
    )

    app.state.page_size = page_size
    app.state.query_session = None
    if catalog is not None:
        if page_size is None:
            page_size = books_per_page()
        app.state.query_session = QuerySession(catalog, page_size=page_size)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(books_router, prefix="/v1")
    app.include_router(options_router, prefix="/v1")
    app.include_router(settings_router, prefix="/v1")

    return app


app = build_app()
