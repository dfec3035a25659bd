"""Filterable, paginated book collection."""
import logging
from typing import Optional, Sequence, Tuple

from bookconnect.models import Book, Filters

logger = logging.getLogger(__name__)


class BookList:
    """
    Full book set plus the current search matches and page cursor.

    Pages only move forward: each advance loads one more page of the
    current matches. Not safe for concurrent use.
    """

    def __init__(self, books: Sequence[Book], page_size: int):
        """
        Initialize the collection.

        Args:
            books: Books in catalog order, with unique ids
            page_size: Number of books per page

        Raises:
            ValueError: If page_size is not positive or ids repeat
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")

        ids = [book.id for book in books]
        if len(set(ids)) != len(ids):
            raise ValueError("Book ids must be unique")

        self.all_books: Tuple[Book, ...] = tuple(books)
        self.page_size = page_size
        self.matches: Tuple[Book, ...] = self.all_books
        self.page = 1

    def __len__(self) -> int:
        return len(self.all_books)

    def search(self, filters: Filters) -> Tuple[Book, ...]:
        """
        Apply filters to the full set and go back to the first page.

        Args:
            filters: Search form values

        Returns:
            Matching books in catalog order
        """
        self.matches = tuple(book for book in self.all_books if book.matches(filters))
        self.page = 1
        logger.info(f"Search {filters} matched {len(self.matches)} of {len(self.all_books)} books")
        return self.matches

    def current_page_items(self) -> Tuple[Book, ...]:
        """Books on the current page (empty if past the end)."""
        start = (self.page - 1) * self.page_size
        end = start + self.page_size
        return self.matches[start:end]

    def shown_items(self) -> Tuple[Book, ...]:
        """All books loaded so far, from the first page to the current one."""
        return self.matches[:self.page * self.page_size]

    def remaining_count(self) -> int:
        """Number of matches beyond the current page."""
        return max(0, len(self.matches) - self.page * self.page_size)

    def advance_page(self) -> bool:
        """
        Load the next page if there is one.

        Returns:
            True if the page moved forward, False if nothing remains
        """
        if self.remaining_count() > 0:
            self.page += 1
            logger.debug(f"Advanced to page {self.page}")
            return True
        return False

    def get(self, book_id: str) -> Optional[Book]:
        """Get a book by ID from the full set."""
        for book in self.all_books:
            if book.id == book_id:
                return book
        return None
