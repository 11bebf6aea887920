from __future__ import annotations

ISSUED = "Issued"
AVAILABLE = "Available"


class Book:
    """Represents a single book in the catalog."""

    def __init__(self, book_id: str, title: str, author: str, issued: bool = False) -> None:
        self.book_id = book_id
        self.title = title
        self.author = author
        self.issued = issued

    @property
    def status(self) -> str:
        return ISSUED if self.issued else AVAILABLE

    def __str__(self) -> str:
        return (
            f"[Book ID: {self.book_id}, Title: {self.title}, "
            f"Author: {self.author}, Status: {self.status}]"
        )

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book({self.book_id!r}, {self.title!r}, {self.author!r}, issued={self.issued!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        return {
            "book_id": self.book_id,
            "title": self.title,
            "author": self.author,
            "issued": self.issued,
            "status": self.status,
        }
