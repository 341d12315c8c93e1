class ItemUnavailable(Exception):
    """Raised when checking out a book that is already checked out."""

    def __init__(self, message: str = "item already checked out") -> None:
        super().__init__(message)
        self.message = message


class ItemNotFound(LookupError):
    """Raised when no title matches inside the requested genre."""

    def __init__(self, message: str = "item not found in this genre") -> None:
        super().__init__(message)
        self.message = message


class CatalogFileError(ValueError):
    """Raised when a JSON catalog file cannot be turned into books."""
