from __future__ import annotations

import logging

from genre_library.exceptions import ItemUnavailable

logger = logging.getLogger(__name__)

AVAILABLE_LABEL = "Available"
CHECKED_OUT_LABEL = "Checked Out"


class Book:
    """A single physical copy of a book in the catalog."""

    def __init__(self, title: str, author: str, genre: str) -> None:
        self._title = title.strip()
        self._author = author.strip()
        self._genre = genre.strip()
        self._available = True

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def genre(self) -> str:
        return self._genre

    @property
    def available(self) -> bool:
        return self._available

    def is_available(self) -> bool:
        return self._available

    def checkout(self) -> None:
        """Mark the copy as checked out.

        Raises ItemUnavailable and leaves the state untouched if the copy is
        already out.
        """
        if not self._available:
            logger.warning(f"Checkout rejected, already checked out: {self._title}")
            raise ItemUnavailable()
        self._available = False
        logger.info(f"Checked out: {self._title}")

    def return_item(self) -> None:
        """Mark the copy as available again. Returning an available copy is allowed."""
        self._available = True
        logger.info(f"Returned: {self._title}")

    def describe(self) -> str:
        label = AVAILABLE_LABEL if self._available else CHECKED_OUT_LABEL
        return f"{self._title} by {self._author} ({self._genre}) - {label}"

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return self.describe()

    def __repr__(self) -> str:
        return f"Book(title={self._title!r}, author={self._author!r}, genre={self._genre!r})"

    def to_dict(self) -> dict:
        return {
            "title": self._title,
            "author": self._author,
            "genre": self._genre,
            "available": self._available,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        # Availability is not restored: every copy enters the catalog available
        return Book(
            title=data["title"],
            author=data["author"],
            genre=data["genre"],
        )
