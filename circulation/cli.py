import logging
from pathlib import Path
from typing import Callable, Optional

import typer

from circulation.activity_log import ActivityLog
from circulation.book import Book
from circulation.config import settings
from circulation.exceptions import CirculationError
from circulation.lending import LendingService
from circulation.logging_config import setup_logging
from circulation.member import Member
from circulation.ui_helpers import (
    print_inventory,
    print_log_lines,
    print_menu,
    print_message,
    set_output_mode,
)

logger = logging.getLogger(__name__)

APP_NAME = settings.app_name

Reader = Callable[[str], str]


def build_service(log_file: Optional[str] = None) -> LendingService:
    activity_log = ActivityLog(log_file or settings.log_file, notify=print_message)
    return LendingService(activity_log=activity_log)


# --- Menu actions ---
def add_book(service: LendingService, read: Reader) -> None:
    book_id = read("Book ID: ").strip()
    title = read("Title: ")
    author = read("Author: ")
    service.add_book(Book(book_id, title, author))

def add_member(service: LendingService, read: Reader) -> None:
    member_id = read("Member ID: ").strip()
    name = read("Name: ")
    service.add_member(Member(member_id, name))

def issue_book(service: LendingService, read: Reader) -> None:
    book_id = read("Book ID: ").strip()
    member_id = read("Member ID: ").strip()
    try:
        service.issue(book_id, member_id)
        print_message("Book Issued.", style="green")
    except CirculationError as e:
        print_message(str(e), style="yellow")

def return_book(service: LendingService, read: Reader) -> None:
    book_id = read("Book ID: ").strip()
    member_id = read("Member ID: ").strip()
    raw_days = read("Days Late: ")
    try:
        late_days = int(raw_days.strip())
    except ValueError:
        print_message("Invalid number of days.", style="red")
        return
    try:
        service.return_book(
            book_id,
            member_id,
            late_days,
            announce=lambda receipt: print_message(
                f"Book returned. Late Fee: {service.format_fee(receipt.fee)}", style="green"
            ),
        )
    except CirculationError as e:
        print_message(str(e), style="yellow")

def show_inventory(service: LendingService, read: Reader) -> None:
    print_inventory(service.inventory())


ACTIONS = {
    1: add_book,
    2: add_member,
    3: issue_book,
    4: return_book,
    5: show_inventory,
}
EXIT_CHOICE = 6


def run_menu(service: LendingService, read: Reader = input) -> None:
    """Interactive menu loop; one command per iteration until Exit or end of input."""
    while True:
        print_menu()
        try:
            raw = read("Choose: ")
        except EOFError:
            logger.info("Input closed, leaving menu")
            return

        try:
            choice = int(raw.strip())
        except ValueError:
            print_message("Invalid choice!", style="red")
            continue

        if choice == EXIT_CHOICE:
            print_message("Goodbye!", style="green")
            return

        action = ACTIONS.get(choice)
        if action is None:
            print_message("Invalid option.", style="red")
            continue

        try:
            action(service, read)
        except EOFError:
            logger.info("Input closed mid-command, leaving menu")
            return


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

def _show_version(value: bool) -> None:
    if value:
        print(f"{settings.app_name} {settings.app_version}")
        raise typer.Exit()

@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Activity log path (default: LIBRARY_LOG_FILE or library_log.txt)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the application version and exit",
    ),
):
    """Global CLI options; runs the interactive menu when no command is given."""
    setup_logging(settings.log_level)
    if output:
        set_output_mode(output)
    ctx.obj = {"log_file": log_file or settings.log_file}
    if ctx.invoked_subcommand is None:
        run_menu(build_service(ctx.obj["log_file"]))

@app.command("menu")
def cli_menu(ctx: typer.Context):
    """Run the interactive circulation menu."""
    run_menu(build_service(ctx.obj["log_file"]))

@app.command("log")
def cli_log(ctx: typer.Context):
    """Print the activity log."""
    activity_log = ActivityLog(Path(ctx.obj["log_file"]))
    print_log_lines(activity_log.read_lines())
