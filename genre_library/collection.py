import logging
from typing import Dict, Iterable, Iterator, List

from genre_library.book import Book
from genre_library.exceptions import ItemNotFound

logger = logging.getLogger(__name__)


class LibraryCollection:
    """Owns every book in the catalog, indexed by genre.

    Books are stored by reference, so a book returned from a lookup can be
    checked out or returned directly and the change is visible here.
    """

    def __init__(self, items: Iterable[Book] = ()) -> None:
        self._genres: Dict[str, List[Book]] = {}
        for item in items:
            self.add_item(item)

    # ------------------------- Core operations ------------------------- #
    def add_item(self, item: Book) -> None:
        """Append a book to its genre bucket. Duplicates are kept as separate copies."""
        if item.genre not in self._genres:
            self._genres[item.genre] = []
            logger.debug(f"New genre bucket: {item.genre}")
        self._genres[item.genre].append(item)
        logger.debug(f"Added {item.title!r} to {item.genre}")

    def available_in_genre(self, genre: str) -> Iterator[Book]:
        """Iterate over the available books of one genre, in insertion order.

        The selection is made when this is called; later checkouts do not
        change an iterator that was already returned. Unknown genres give an
        empty iterator.
        """
        books = self._genres.get(genre, [])
        return iter([book for book in books if book.is_available()])

    def find_by_title(self, genre: str, title: str) -> Book:
        """Return the first book in ``genre`` whose title matches ``title``, ignoring case.

        Availability is not taken into account.
        """
        wanted = title.casefold()
        for book in self._genres.get(genre, []):
            if book.title.casefold() == wanted:
                return book
        logger.warning(f"No title {title!r} in genre {genre!r}")
        raise ItemNotFound()

    def all_available(self) -> Iterator[Book]:
        """Iterate over the available books of every genre."""
        return iter([book for books in self._genres.values() for book in books if book.is_available()])

    # ------------------------- Inspection ------------------------- #
    def genres(self) -> List[str]:
        return list(self._genres)

    def count_available(self, genre: str) -> int:
        return sum(1 for book in self._genres.get(genre, []) if book.is_available())

    def summary(self) -> Dict[str, Dict[str, int]]:
        """Per-genre totals, e.g. ``{"Fantasy": {"total": 2, "available": 1}}``."""
        return {
            genre: {"total": len(books), "available": self.count_available(genre)}
            for genre, books in self._genres.items()
        }

    def __iter__(self) -> Iterator[Book]:
        return self.all_available()

    def __len__(self) -> int:
        return sum(len(books) for books in self._genres.values())
