import logging
from typing import Optional

import typer

from genre_library.collection import LibraryCollection
from genre_library.config import settings
from genre_library.exceptions import CatalogFileError, ItemNotFound, ItemUnavailable
from genre_library.seed import build_collection
from genre_library.ui_helpers import (
    print_book_list,
    print_genre_summary,
    print_message,
    set_output_mode,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# Single catalog instance for the current invocation
class LibraryManager:
    _instance: Optional[LibraryCollection] = None

    @classmethod
    def load(cls, catalog_file: Optional[str] = None) -> LibraryCollection:
        """Build a fresh catalog; every CLI run starts from the seed data."""
        cls._instance = build_collection(catalog_file)
        logger.debug(f"Catalog ready with {len(cls._instance)} books")
        return cls._instance

    @classmethod
    def get_instance(cls) -> LibraryCollection:
        if cls._instance is None:
            return cls.load(settings.catalog_file)
        return cls._instance


# --- Typer CLI Application ---
app = typer.Typer(help=settings.app_name)

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    catalog: Optional[str] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="JSON catalog file to seed from instead of the sample books",
    ),
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
):
    """Global options for the CLI (output mode, seed data, logging)."""
    level = log_level.upper().strip()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"{log_level!r} is not one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )
    logging.basicConfig(level=level)
    if output:
        set_output_mode(output)
    try:
        LibraryManager.load(catalog or settings.catalog_file)
    except CatalogFileError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_session, genre=None, checkout_title=None, return_title=None)

@app.command("session")
def cli_session(
    genre: Optional[str] = typer.Option(None, "--genre", "-g", help="Genre to browse"),
    checkout_title: Optional[str] = typer.Option(None, "--checkout", help="Title to check out"),
    return_title: Optional[str] = typer.Option(None, "--return", help="Title to return"),
):
    """Browse one genre, check out one book, then return one book."""
    lib = LibraryManager.get_instance()

    if genre is None:
        genre = typer.prompt("Enter genre to browse")
    genre = genre.strip()
    print_book_list(list(lib.available_in_genre(genre)), f"Available books in {genre}:")

    if checkout_title is None:
        checkout_title = typer.prompt("Enter the title of the book to checkout")
    try:
        book = lib.find_by_title(genre, checkout_title.strip())
        book.checkout()
        print_message(f"You checked out: {book.describe()}")
    except (ItemNotFound, ItemUnavailable) as e:
        print_message(f"Error: {e}", "error")

    if return_title is None:
        return_title = typer.prompt("Enter the title of the book to return")
    try:
        book = lib.find_by_title(genre, return_title.strip())
        book.return_item()
        print_message(f"You returned: {book.describe()}")
    except ItemNotFound as e:
        print_message(f"Error: {e}", "error")

@app.command("browse")
def cli_browse(genre: str = typer.Argument(..., help="Genre to browse (case-sensitive)")):
    """List the available books in one genre."""
    lib = LibraryManager.get_instance()
    print_book_list(list(lib.available_in_genre(genre)), f"Available books in {genre}:")

@app.command("available")
def cli_available():
    """List the available books across all genres."""
    lib = LibraryManager.get_instance()
    print_book_list(list(lib.all_available()), "Available books:")

@app.command("genres")
def cli_genres():
    """Show how many books each genre has, and how many are available."""
    lib = LibraryManager.get_instance()
    print_genre_summary(lib.summary())


if __name__ == "__main__":
    app()
