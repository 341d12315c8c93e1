"""Genre Library - Core Application Package

This package contains the core application modules including:
- Catalog items and their availability (book.py)
- Genre-indexed collection (collection.py)
- Sample data and catalog files (seed.py)
- CLI interface (main.py)
"""

from genre_library.book import Book
from genre_library.collection import LibraryCollection
from genre_library.exceptions import CatalogFileError, ItemNotFound, ItemUnavailable

__all__ = [
    "Book",
    "LibraryCollection",
    "ItemUnavailable",
    "ItemNotFound",
    "CatalogFileError",
]
