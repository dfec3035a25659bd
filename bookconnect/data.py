"""Catalog feed: books plus author and genre lookup tables."""
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

from bookconnect.config import DEFAULT_CATALOG_PATH
from bookconnect.models import Book
from bookconnect.parse import deduplicate_books, parse_books

logger = logging.getLogger(__name__)

BOOKS_PER_PAGE = 36


@dataclass
class Catalog:
    """Books in catalog order with their lookup tables."""
    books: List[Book]
    authors: Dict[str, str] = field(default_factory=dict)
    genres: Dict[str, str] = field(default_factory=dict)
    books_per_page: int = BOOKS_PER_PAGE


def load_catalog(path: Union[str, Path] = DEFAULT_CATALOG_PATH) -> Catalog:
    """
    Load a catalog JSON document.

    Args:
        path: File with "books", "authors", "genres" and an optional
            "BOOKS_PER_PAGE" key

    Returns:
        Catalog with parsed, deduplicated books
    """
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    books = deduplicate_books(parse_books(raw.get("books", [])))
    logger.info(f"Loaded {len(books)} books from {path}")

    return Catalog(
        books=books,
        authors=dict(raw.get("authors", {})),
        genres=dict(raw.get("genres", {})),
        books_per_page=int(raw.get("BOOKS_PER_PAGE", BOOKS_PER_PAGE))
    )
