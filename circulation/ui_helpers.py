import os
import json
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich import box

from circulation.book import Book
from circulation.config import settings

# Environment variable controlling CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "CIRCULATION_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

MENU_ITEMS = [
    ("1", "Add Book"),
    ("2", "Add Member"),
    ("3", "Issue Book"),
    ("4", "Return Book"),
    ("5", "Show Inventory"),
    ("6", "Exit"),
]
EMPTY_INVENTORY = "Library has no books yet."

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Unknown values are ignored; the current mode stays in effect

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_message(text: str, style: Optional[str] = None) -> None:
    """Print a status line; rich mode adds colour, the text itself never changes."""
    if get_output_mode() == "rich":
        _console.print(escape(text), style=style)
    else:
        print(text)

def print_menu() -> None:
    if get_output_mode() == "rich":
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label in MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", label)
        _console.print(Panel(table, title=settings.app_name, border_style="cyan", box=box.HEAVY, padding=(1, 2)))
        return

    print("\n========= LIBRARY MENU =========")
    for key, label in MENU_ITEMS:
        print(f"{key}. {label}")

def print_inventory(books: List[Book]) -> None:
    """Print the inventory in the current output mode.
    - plain: one '[Book ID: ..., Status: ...]' line per book
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
        return

    if not books:
        print(EMPTY_INVENTORY)
        return

    if mode == "rich":
        table = Table(title="📚 Inventory", show_lines=True, header_style="bold cyan")
        table.add_column("Book ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status")
        for b in books:
            status_style = "yellow" if b.issued else "green"
            table.add_row(escape(b.book_id), escape(b.title), escape(b.author), f"[{status_style}]{b.status}[/]")
        _console.print(table)
    else:
        for b in books:
            print(str(b))

def print_log_lines(lines: List[str]) -> None:
    if not lines:
        print("Activity log is empty.")
        return

    if get_output_mode() == "json":
        print(json.dumps(lines, ensure_ascii=False))
    else:
        for line in lines:
            print(line)
