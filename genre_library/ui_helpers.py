import os
import json
from typing import Dict, List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from genre_library.book import AVAILABLE_LABEL, CHECKED_OUT_LABEL, Book
from genre_library.config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain', 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}
STATUS_STYLES = {"ok": "green", "error": "red"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Book], heading: str, title: Optional[str] = None) -> None:
    """Print books according to the current output mode.
    - plain: heading line, then '- <description>' per book
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=title or heading, show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Genre", style="magenta", no_wrap=True)
        table.add_column("Status", no_wrap=True)
        for b in books:
            status = f"[green]{AVAILABLE_LABEL}[/]" if b.is_available() else f"[red]{CHECKED_OUT_LABEL}[/]"
            table.add_row(escape(b.title), escape(b.author), escape(b.genre), status)
        _console.print(table)
    else:
        print(heading)
        for b in books:
            print(f"- {b.describe()}")

def print_genre_summary(summary: Dict[str, Dict[str, int]]) -> None:
    """Print per-genre totals.
    - plain: '<genre>: <available>/<total> available' lines, or 'No books in library.'
    - json: JSON object
    - rich: Rich table
    """
    mode = get_output_mode()

    if not summary:
        print("No books in library.")
        return

    if mode == "json":
        print(json.dumps(summary, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="Genres", header_style="bold cyan")
        table.add_column("Genre", style="magenta")
        table.add_column("Available", justify="right")
        table.add_column("Total", justify="right")
        for genre, counts in summary.items():
            table.add_row(escape(genre), str(counts["available"]), str(counts["total"]))
        _console.print(table)
    else:
        for genre, counts in summary.items():
            print(f"{genre}: {counts['available']}/{counts['total']} available")

def print_message(message: str, status: str = "ok") -> None:
    """Single status line.
    - plain: the message as is
    - json: one {"status": ..., "message": ...} object per line
    - rich: coloured by status
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps({"status": status, "message": message}, ensure_ascii=False))
    elif mode == "rich":
        style = STATUS_STYLES.get(status, "white")
        _console.print(f"[{style}]{escape(message)}[/]", highlight=False)
    else:
        print(message)
