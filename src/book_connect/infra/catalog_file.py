"""Load a Catalog from the JSON document named by CATALOG_PATH.

Expected shape::

    {
        "books": [{"id": ..., "title": ..., "author": ..., "genres": [...], ...}],
        "authors": {"<key>": "<name>"},
        "genres": {"<key>": "<name>"}
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from book_connect.domain.catalog import Catalog
from book_connect.domain.errors import MalformedRecordError

logger = logging.getLogger(__name__)


def load_catalog_file(path: Path) -> Catalog:
    """
    Read and parse a catalog document.

    Args:
        path: Location of the JSON document

    Returns:
        Loaded Catalog

    Raises:
        MalformedRecordError: If the document lacks a section or a record is malformed
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    logger.info("Loading catalog file", extra={"path": str(path)})

    with path.open("r", encoding="utf-8") as f:
        document = json.load(f)

    if not isinstance(document, dict):
        raise MalformedRecordError("Catalog document must be a JSON object")

    for section in ("books", "authors", "genres"):
        if section not in document:
            raise MalformedRecordError(
                f"Catalog document is missing '{section}'", field=section
            )

    return Catalog.load(document["books"], document["authors"], document["genres"])
