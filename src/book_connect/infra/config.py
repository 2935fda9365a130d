from __future__ import annotations

import os
from pathlib import Path

DEFAULT_BOOKS_PER_PAGE = 36


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def catalog_path() -> Path:
    path = os.getenv("CATALOG_PATH")

    if not path:
        raise RuntimeError("CATALOG_PATH environment variable is not set")

    return Path(path)


def books_per_page() -> int:
    raw = os.getenv("BOOKS_PER_PAGE")

    if not raw:
        return DEFAULT_BOOKS_PER_PAGE

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"BOOKS_PER_PAGE must be an integer, got {raw!r}") from None

    if value < 1:
        raise RuntimeError("BOOKS_PER_PAGE must be >= 1")

    return value
