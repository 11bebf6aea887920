import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from circulation.activity_log import ActivityLog
from circulation.book import Book
from circulation.catalog import Catalog
from circulation.config import settings
from circulation.directory import Directory
from circulation.exceptions import AlreadyIssuedError, NotFoundError, NotIssuedError
from circulation.member import Member

logger = logging.getLogger(__name__)

LATE_FEE_PER_DAY = 2


@dataclass
class ReturnReceipt:
    """Outcome of a successful return, handed back to the caller for display."""

    book_id: str
    member_id: str
    late_days: int
    fee: int


def late_fee(late_days: int) -> int:
    # No validation: zero or negative day counts pass straight through.
    return late_days * LATE_FEE_PER_DAY


class LendingService:
    """Issues and returns books, keeping the catalog and member directory in step."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        directory: Optional[Directory] = None,
        activity_log: Optional[ActivityLog] = None,
        currency_symbol: Optional[str] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self.directory = directory if directory is not None else Directory()
        self.activity_log = activity_log if activity_log is not None else ActivityLog()
        self.currency_symbol = settings.currency_symbol if currency_symbol is None else currency_symbol

    # ------------------------- Registration ------------------------- #
    def add_book(self, book: Book) -> None:
        self.catalog.add(book)
        logger.info(f"Book added: {book.book_id}")
        self.activity_log.append(f"Added Book: {book.book_id}")

    def add_member(self, member: Member) -> None:
        self.directory.add(member)
        logger.info(f"Member added: {member.member_id}")
        self.activity_log.append(f"Added Member: {member.member_id}")

    def inventory(self) -> List[Book]:
        return self.catalog.all()

    # ------------------------- Transitions ------------------------- #
    def issue(self, book_id: str, member_id: str) -> Book:
        """Mark an available book as issued to ``member_id``.

        Raises NotFoundError if the book or member is unknown (the book is
        checked first) and AlreadyIssuedError if the book is already out.
        Nothing changes when an error is raised.
        """
        book = self.catalog.require(book_id, "Book not found.")
        member = self.directory.require(member_id, "Member not found.")
        if book.issued:
            raise AlreadyIssuedError("Book already issued.")

        book.issued = True
        member.borrow(book_id)

        logger.info(f"Book {book_id} issued to member {member_id}")
        self.activity_log.append(f"Issued Book: {book_id} to Member {member_id}")
        return book

    def return_book(
        self,
        book_id: str,
        member_id: str,
        late_days: int,
        announce: Optional[Callable[[ReturnReceipt], None]] = None,
    ) -> ReturnReceipt:
        """Mark an issued book as available again and compute the late fee.

        The returning member is not required to be the one the book was
        issued to; any known member id is accepted. ``announce`` receives the
        receipt before the activity log is written.

        Raises NotFoundError if the book or member is unknown and
        NotIssuedError if the book is not currently issued.
        """
        book = self.catalog.get(book_id)
        member = self.directory.get(member_id)
        if book is None or member is None:
            raise NotFoundError("Invalid Book/Member.", kind="book" if book is None else "member")
        if not book.issued:
            raise NotIssuedError("Book was not issued.")

        book.issued = False
        member.release(book_id)
        fee = late_fee(late_days)
        receipt = ReturnReceipt(book_id=book_id, member_id=member_id, late_days=late_days, fee=fee)
        if announce is not None:
            announce(receipt)

        logger.info(f"Book {book_id} returned by member {member_id}, fee={fee}")
        self.activity_log.append(
            f"Returned Book: {book_id} by Member {member_id} | Late Fee: {self.format_fee(fee)}"
        )
        return receipt

    # ------------------------- Utilities ------------------------- #
    def format_fee(self, fee: int) -> str:
        return f"{self.currency_symbol}{fee}"
