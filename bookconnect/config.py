"""Configuration management."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "sample" / "catalog.json"


class Config:
    """Application configuration."""

    # Catalog feed
    CATALOG_PATH = os.getenv("CATALOG_PATH", str(DEFAULT_CATALOG_PATH))

    # Overrides the catalog's own page size when set
    BOOKS_PER_PAGE = int(os.getenv("BOOKS_PER_PAGE")) if os.getenv("BOOKS_PER_PAGE") else None

    # Output
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    DEFAULT_FORMAT = os.getenv("DEFAULT_FORMAT", "table")
