"""Initial catalog contents.

The CLI starts every run from a fresh in-memory catalog, filled either with
the built-in sample books or with the entries of a JSON catalog file. The
file is a JSON array of ``{"title": ..., "author": ..., "genre": ...}``
objects; other keys are ignored.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from genre_library.book import Book
from genre_library.collection import LibraryCollection
from genre_library.exceptions import CatalogFileError

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    ("1984", "George Orwell", "Dystopian"),
    ("Brave New World", "Aldous Huxley", "Dystopian"),
    ("The Hobbit", "J.R.R. Tolkien", "Fantasy"),
    ("Harry Potter", "J.K. Rowling", "Fantasy"),
]

REQUIRED_FIELDS = ("title", "author", "genre")


def sample_collection() -> LibraryCollection:
    return LibraryCollection(Book(title, author, genre) for title, author, genre in SAMPLE_BOOKS)


def load_books(path: Union[str, Path]) -> List[Book]:
    """Read books from a JSON catalog file.

    Raises
    ------
    CatalogFileError
        If the file is missing or unreadable, is not UTF-8 JSON, is not a list,
        or an entry lacks one of ``title``, ``author``, ``genre``.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise CatalogFileError(f"Catalog file not found: {path}") from e
    except OSError as e:
        raise CatalogFileError(f"Cannot read catalog file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogFileError(f"Catalog file is not valid UTF-8: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogFileError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(raw, list):
        raise CatalogFileError(f"Catalog file must contain a JSON array: {path}")

    books: List[Book] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise CatalogFileError(f"Entry {index} is not an object")
        missing = [key for key in REQUIRED_FIELDS if not isinstance(entry.get(key), str)]
        if missing:
            raise CatalogFileError(f"Entry {index} is missing {', '.join(missing)}")
        books.append(Book.from_dict(entry))

    logger.info(f"Loaded {len(books)} books from {path}")
    return books


def build_collection(catalog_file: Optional[Union[str, Path]] = None) -> LibraryCollection:
    """Fresh catalog from ``catalog_file`` if given, otherwise the sample books."""
    if catalog_file:
        return LibraryCollection(load_books(catalog_file))
    return sample_collection()
