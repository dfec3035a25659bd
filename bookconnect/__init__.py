"""Catalog browser: filter and page through a static list of books."""
