"""Data models for books."""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Filters:
    """
    Search form values.

    ``author`` and ``genre`` are ``None`` when the field is unconstrained.
    A ``title`` of ``None`` means the field was absent and matches nothing.
    """
    title: Optional[str] = ""
    author: Optional[str] = None
    genre: Optional[str] = None


@dataclass(frozen=True)
class BookPreview:
    """Data needed to render a clickable preview card."""
    id: str
    image: str
    title: str
    author_name: str


@dataclass(frozen=True)
class BookDetail:
    """Data shown in the active book panel."""
    id: str
    title: str
    subtitle: str
    description: str
    image: str


@dataclass(frozen=True)
class Book:
    """Single catalog entry."""
    id: str
    title: str
    author: str
    image: str
    description: str
    published: Optional[datetime]
    genres: Tuple[str, ...] = ()

    @property
    def year(self) -> str:
        """Publication year, or "Unknown" if the date did not parse."""
        return str(self.published.year) if self.published else "Unknown"

    def matches(self, filters: Filters) -> bool:
        """
        Check the book against title, author and genre filters.

        Args:
            filters: Search form values

        Returns:
            True if every clause passes
        """
        if filters.title is None:
            title_match = False
        else:
            title_match = (
                not filters.title.strip()
                or filters.title.lower() in self.title.lower()
            )

        # Empty ids come from absent form fields and never match
        author_match = filters.author is None or (
            bool(filters.author) and self.author == filters.author
        )
        genre_match = filters.genre is None or (
            bool(filters.genre) and filters.genre in self.genres
        )

        return title_match and author_match and genre_match

    def preview(self, authors: Dict[str, str]) -> BookPreview:
        """Build a preview card, resolving the author id to a display name."""
        return BookPreview(
            id=self.id,
            image=self.image,
            title=self.title,
            author_name=authors.get(self.author, self.author)
        )

    def detail(self, authors: Dict[str, str]) -> BookDetail:
        """Build the active book panel with "Author (year)" as subtitle."""
        author_name = authors.get(self.author, self.author)
        return BookDetail(
            id=self.id,
            title=self.title,
            subtitle=f"{author_name} ({self.year})",
            description=self.description,
            image=self.image
        )
