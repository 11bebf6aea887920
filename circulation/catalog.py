from typing import Dict, List, Optional

from circulation.book import Book
from circulation.exceptions import NotFoundError


class Catalog:
    """In-memory book store keyed by book id."""

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}

    def add(self, book: Book) -> None:
        """Insert ``book``; an existing book with the same id is replaced."""
        self._books[book.book_id] = book

    def get(self, book_id: str) -> Optional[Book]:
        return self._books.get(book_id)

    def require(self, book_id: str, message: str = "Book not found.") -> Book:
        book = self.get(book_id)
        if book is None:
            raise NotFoundError(message, kind="book")
        return book

    def all(self) -> List[Book]:
        return list(self._books.values())

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books
