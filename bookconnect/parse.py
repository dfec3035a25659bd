"""Parse and normalize raw catalog entries and search form values."""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from bookconnect.models import Book, Filters

logger = logging.getLogger(__name__)

# Form value meaning "no constraint" for author and genre
ANY = "any"


def parse_published(value: Any) -> Optional[datetime]:
    """
    Parse a publication date string.

    Args:
        value: ISO-8601 date or timestamp, e.g. "1997-08-26T22:00:00.000Z"

    Returns:
        datetime or None if the value cannot be parsed
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_text(item: Dict[str, Any], key: str, book_id: Any) -> str:
    """Read a text field, degrading null or non-string values."""
    value = item.get(key)
    if value is None:
        if key in item:
            logger.warning(f"Null {key} for {book_id}, using empty string")
        return ""
    if not isinstance(value, str):
        logger.warning(f"Non-string {key} for {book_id}: {value!r}")
        return str(value)
    return value


def _parse_genres(value: Any, book_id: Any) -> Tuple[str, ...]:
    """
    Normalize the genres field to a tuple of genre ids.

    A single id string is wrapped; other non-list values are dropped.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        logger.warning(f"Scalar genres for {book_id}: {value!r}")
        return (value,)
    if not isinstance(value, (list, tuple)):
        logger.warning(f"Ignoring malformed genres for {book_id}: {value!r}")
        return ()
    return tuple(str(genre) for genre in value if genre is not None)


def parse_book(item: Dict[str, Any]) -> Optional[Book]:
    """
    Parse a single raw catalog entry.

    Args:
        item: Mapping with id, title, author, image, description,
            published and genres keys

    Returns:
        Book object or None if the entry has no id
    """
    book_id = item.get("id", "")
    if not book_id:
        logger.warning(f"Skipping catalog entry without id: {item.get('title')!r}")
        return None

    published = parse_published(item.get("published"))
    if published is None:
        logger.warning(f"Unparsable published date for {book_id}: {item.get('published')!r}")

    return Book(
        id=str(book_id),
        title=_parse_text(item, "title", book_id),
        author=_parse_text(item, "author", book_id),
        image=_parse_text(item, "image", book_id),
        description=_parse_text(item, "description", book_id),
        published=published,
        genres=_parse_genres(item.get("genres"), book_id)
    )


def parse_books(items: List[Dict[str, Any]]) -> List[Book]:
    """
    Parse a list of raw catalog entries.

    Args:
        items: Raw entries in catalog order

    Returns:
        List of Book objects (entries without an id are dropped)
    """
    books = []

    for item in items:
        book = parse_book(item)
        if book:
            books.append(book)

    return books


def deduplicate_books(books: List[Book]) -> List[Book]:
    """
    Remove duplicate books by ID.

    Args:
        books: List of Book objects

    Returns:
        Deduplicated list of books
    """
    seen_ids = set()
    unique_books = []

    for book in books:
        if book.id not in seen_ids:
            seen_ids.add(book.id)
            unique_books.append(book)
        else:
            logger.warning(f"Dropping duplicate book id: {book.id}")

    return unique_books


def _parse_choice(value: Optional[str]) -> Optional[str]:
    """Map a form choice to a filter value: "any" to None, absent to ""."""
    if value is None:
        return ""
    if value == ANY:
        return None
    return value


def parse_filters(form: Dict[str, Optional[str]]) -> Filters:
    """
    Convert raw search form values into Filters.

    The "any" option becomes an unconstrained field. Absent fields
    match nothing.

    Args:
        form: Mapping with title, author and genre keys

    Returns:
        Filters object
    """
    return Filters(
        title=form.get("title"),
        author=_parse_choice(form.get("author")),
        genre=_parse_choice(form.get("genre"))
    )
