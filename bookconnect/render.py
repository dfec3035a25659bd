"""Render previews, details and lookup tables for the terminal or HTML."""
import html
import json
from dataclasses import asdict
from typing import Dict, List

from tabulate import tabulate

from bookconnect.models import BookDetail, BookPreview
from bookconnect.parse import ANY

FORMATS = ["table", "json", "compact", "html"]

NO_RESULTS_MESSAGE = "No results found. Your filters might be too narrow."


def _truncate(text: str, width: int) -> str:
    return text[:width] + "..." if len(text) > width else text


def preview_html(preview: BookPreview) -> str:
    """
    Build a preview button element.

    Args:
        preview: Preview data for one book

    Returns:
        HTML string with escaped values
    """
    return (
        f'<button class="preview" data-preview="{html.escape(preview.id)}">\n'
        f'    <img class="preview__image" src="{html.escape(preview.image)}" />\n'
        f'    <div class="preview__info">\n'
        f'        <h3 class="preview__title">{html.escape(preview.title)}</h3>\n'
        f'        <div class="preview__author">{html.escape(preview.author_name)}</div>\n'
        f'    </div>\n'
        f'</button>'
    )


def format_previews(previews: List[BookPreview], format_type: str) -> str:
    """Format previews in the given output format."""
    if format_type == "table":
        headers = ["ID", "Title", "Author"]
        rows = [
            [p.id, _truncate(p.title, 50), _truncate(p.author_name, 30)]
            for p in previews
        ]
        return tabulate(rows, headers=headers, tablefmt="grid")

    if format_type == "json":
        return json.dumps([asdict(p) for p in previews], indent=2)

    if format_type == "compact":
        return "\n".join(
            f"{i}. {p.title} - {p.author_name}"
            for i, p in enumerate(previews, 1)
        )

    if format_type == "html":
        return "\n".join(preview_html(p) for p in previews)

    raise ValueError(f"Unknown format: {format_type}")


def display_previews(previews: List[BookPreview], format_type: str):
    """Display previews in specified format."""
    if not previews:
        print(NO_RESULTS_MESSAGE)
        return
    print(format_previews(previews, format_type))


def show_more_label(remaining: int) -> str:
    """Label for the "load more" button."""
    if remaining > 0:
        return f"Show more ({remaining})"
    return "Show more (0) [disabled]"


def display_detail(detail: BookDetail, format_type: str = "table"):
    """Display the active book panel."""
    if format_type == "json":
        print(json.dumps(asdict(detail), indent=2))
        return

    print("\n" + "=" * 50)
    print(detail.title)
    print(detail.subtitle)
    print("=" * 50)
    print(detail.description)
    print(f"\nCover: {detail.image}\n")


def display_lookup(table: Dict[str, str], title: str):
    """Display an id to name lookup table as filter options."""
    rows = [[ANY, f"All {title}"]] + [[key, name] for key, name in table.items()]
    print(tabulate(rows, headers=["Value", title[:-1]], tablefmt="simple"))
