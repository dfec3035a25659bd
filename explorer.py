#!/usr/bin/env python3
"""Book Explorer CLI - browse a static catalog."""
import argparse
import sys
import logging
from bookconnect.catalog import BookList
from bookconnect.config import Config
from bookconnect.data import Catalog, load_catalog
from bookconnect.parse import ANY, parse_filters
from bookconnect.render import (
    FORMATS,
    display_detail,
    display_lookup,
    display_previews,
    show_more_label,
)

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def setup_book_list(catalog: Catalog, page_size=None) -> BookList:
    """Build the browsable collection from a loaded catalog."""
    size = page_size
    if size is None:
        size = Config.BOOKS_PER_PAGE or catalog.books_per_page
    return BookList(catalog.books, size)


def search_books(args, catalog: Catalog) -> int:
    """Search the catalog and show the loaded pages."""
    book_list = setup_book_list(catalog, args.page_size)

    filters = parse_filters({
        "title": args.title,
        "author": args.author,
        "genre": args.genre
    })
    book_list.search(filters)

    # Each extra page is one "Show more" click
    for _ in range(args.pages - 1):
        if not book_list.advance_page():
            break

    previews = [book.preview(catalog.authors) for book in book_list.shown_items()]
    display_previews(previews, args.format)

    if book_list.matches:
        print(f"\n{show_more_label(book_list.remaining_count())}")
    return 0


def show_book(args, catalog: Catalog) -> int:
    """Show the detail panel for one book."""
    book = setup_book_list(catalog).get(args.book_id)

    if book is None:
        logger.error(f"Unknown book id: {args.book_id}")
        return 1

    display_detail(book.detail(catalog.authors), args.format)
    return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Book Explorer - browse, filter and page through a book catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # First page of the whole catalog
  %(prog)s search

  # Filter by title text and genre, loading three pages
  %(prog)s search --title dune --genre genre_1 --pages 3

  # Show one book
  %(prog)s show book_01
        """
    )
    parser.add_argument("--catalog", default=Config.CATALOG_PATH, help="Catalog JSON file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Search command
    search_parser = subparsers.add_parser("search", help="Search the catalog")
    search_parser.add_argument("--title", default="", help="Text to find in titles (case-insensitive)")
    search_parser.add_argument("--author", default=ANY, help="Author id (default: any)")
    search_parser.add_argument("--genre", default=ANY, help="Genre id (default: any)")
    search_parser.add_argument("--pages", type=positive_int, default=1, help="Pages to load (default: 1)")
    search_parser.add_argument("--page-size", type=positive_int, help="Books per page (default: catalog setting)")
    search_parser.add_argument("--format", choices=FORMATS, default=Config.DEFAULT_FORMAT, help="Output format")

    # Show command
    show_parser = subparsers.add_parser("show", help="Show book details")
    show_parser.add_argument("book_id", help="Book id")
    show_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    # Lookup commands
    subparsers.add_parser("authors", help="List author filter options")
    subparsers.add_parser("genres", help="List genre filter options")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        catalog = load_catalog(args.catalog)

        if args.command == "search":
            return search_books(args, catalog)

        elif args.command == "show":
            return show_book(args, catalog)

        elif args.command == "authors":
            display_lookup(catalog.authors, "Authors")

        elif args.command == "genres":
            display_lookup(catalog.genres, "Genres")

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1

    return 0


def run():
    """Console script entry point."""
    # Configure logging
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
