#!/usr/bin/env python3
"""
Generate a sample catalog document with deterministic random data.

Features:
- Deterministic: fixed seed → same catalog every run
- Validated: the document is loaded through Catalog.load before writing
- Realism-lite: authors lean towards a couple of favourite genres

Usage:
    python scripts/generate_catalog.py data/catalog.json
    CATALOG_PATH=data/catalog.json uvicorn book_connect.entrypoints.http.app:app
"""

from __future__ import annotations

import json
import random
import sys
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from book_connect.domain.catalog import Catalog


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_BOOKS = 120  # Enough for a few "show more" pages at 36 per page


# ==============================================================================
# Sample Data
# ==============================================================================

GENRES = [
    "Fantasy",
    "Science Fiction",
    "Mystery",
    "Romance",
    "Horror",
    "Historical",
    "Poetry",
    "Biography",
]

AUTHORS = [
    "Ada Marsh",
    "Tomas Ekberg",
    "Priya Raman",
    "Leo Okafor",
    "Marguerite Vale",
    "Hiro Tanabe",
    "Nell Brannigan",
    "Santiago Ibarra",
]

TITLE_ADJECTIVES = ["Silent", "Crimson", "Hollow", "Last", "Wandering", "Broken", "Golden"]
TITLE_NOUNS = ["Harbor", "Orchard", "Lantern", "Crown", "Tide", "Cartographer", "Garden"]


def make_key() -> str:
    return str(uuid.UUID(int=random.getrandbits(128)))


def generate_title() -> str:
    adjective = random.choice(TITLE_ADJECTIVES)
    noun = random.choice(TITLE_NOUNS)
    if random.random() < 0.3:
        return f"The {adjective} {noun}"
    return f"{adjective} {noun}"


def generate_document(num_books: int = NUM_BOOKS, seed: int = RANDOM_SEED) -> dict:
    """
    Build a catalog document.

    Args:
        num_books: Number of book records to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    genres = {make_key(): name for name in GENRES}
    authors = {make_key(): name for name in AUTHORS}
    genre_keys = list(genres)

    # Each author favours two genres
    favourites = {author: random.sample(genre_keys, k=2) for author in authors}

    epoch = datetime(1950, 1, 1, tzinfo=timezone.utc)
    books = []
    for _ in range(num_books):
        author = random.choice(list(authors))
        book_genres = set(favourites[author][: random.randint(1, 2)])
        if random.random() < 0.2:
            book_genres.add(random.choice(genre_keys))

        book_id = make_key()
        published = epoch + timedelta(days=random.randint(0, 365 * 74))
        books.append(
            {
                "id": book_id,
                "title": generate_title(),
                "author": author,
                "genres": sorted(book_genres),
                "image": f"https://covers.example.org/{book_id}.jpg",
                "description": f"A {genres[next(iter(book_genres))].lower()} story.",
                "published": published.isoformat().replace("+00:00", "Z"),
            }
        )

    return {"books": books, "authors": authors, "genres": genres}


def write_catalog(path: Path) -> None:
    document = generate_document()

    # Fail before writing if the document would not load
    catalog = Catalog.load(document["books"], document["authors"], document["genres"])

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2), encoding="utf-8")

    print(f"Wrote {len(catalog)} books to {path}")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("data/catalog.json")
    try:
        write_catalog(target)
    except Exception as e:
        print(f"Error generating catalog: {e}", file=sys.stderr)
        sys.exit(1)
