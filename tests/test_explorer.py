"""Tests for the explorer CLI."""
import json

import pytest

from bookconnect.config import DEFAULT_CATALOG_PATH, Config
from explorer import main


@pytest.fixture(autouse=True)
def bundled_catalog(monkeypatch):
    """Ignore CATALOG_PATH and BOOKS_PER_PAGE from a local .env."""
    monkeypatch.setattr(Config, "CATALOG_PATH", str(DEFAULT_CATALOG_PATH))
    monkeypatch.setattr(Config, "BOOKS_PER_PAGE", None)


def test_search_first_page(capsys):
    """Test the default search shows one page and the remaining count."""
    assert main(["search", "--format", "compact"]) == 0
    out = capsys.readouterr().out

    assert "1. Dune - Frank Herbert" in out
    assert "10. Small Gods" in out
    assert "11." not in out
    assert "Show more (15)" in out


def test_search_load_more_pages(capsys):
    """Test loading extra pages accumulates results."""
    assert main(["search", "--format", "compact", "--pages", "5"]) == 0
    out = capsys.readouterr().out

    assert "25. Sense and Sensibility" in out
    assert "Show more (0)" in out


def test_search_filters(capsys):
    """Test title filtering through the CLI."""
    assert main(["search", "--title", "DUNE", "--format", "json"]) == 0
    out = capsys.readouterr().out

    data = json.loads(out.split("\nShow more")[0])
    assert [p["title"] for p in data] == ["Dune", "Dune Messiah", "Children of Dune"]


def test_search_no_results(capsys):
    """Test a search with no matches."""
    assert main(["search", "--author", "author_1", "--genre", "genre_3"]) == 0

    assert "No results found" in capsys.readouterr().out


def test_show_book(capsys):
    """Test the detail view."""
    assert main(["show", "book_19"]) == 0

    assert "Isaac Asimov (1951)" in capsys.readouterr().out


def test_show_unknown_book():
    """Test an unknown id exits with an error."""
    assert main(["show", "nope"]) == 1


def test_missing_catalog(tmp_path):
    """Test a missing catalog file exits with an error."""
    assert main(["--catalog", str(tmp_path / "none.json"), "authors"]) == 1


def test_no_command():
    """Test running without a command prints help and fails."""
    assert main([]) == 1


def test_explicit_page_size(capsys):
    """Test --page-size overrides the catalog setting."""
    assert main(["search", "--format", "compact", "--page-size", "20"]) == 0
    out = capsys.readouterr().out

    assert "20. I, Robot" in out
    assert "Show more (5)" in out


def test_page_size_must_be_positive(capsys):
    """Test zero and negative page sizes are rejected by argparse."""
    for value in ["0", "-3"]:
        with pytest.raises(SystemExit) as exc:
            main(["search", "--page-size", value])
        assert exc.value.code == 2
        assert "positive integer" in capsys.readouterr().err


def test_pages_must_be_positive():
    """Test --pages 0 is rejected."""
    with pytest.raises(SystemExit):
        main(["search", "--pages", "0"])
