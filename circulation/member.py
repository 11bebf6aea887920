from __future__ import annotations

from typing import List


class Member:
    """A library member and the ids of the books they currently hold."""

    def __init__(self, member_id: str, name: str, borrowed: List[str] | None = None) -> None:
        self.member_id = member_id
        self.name = name
        self.borrowed: List[str] = list(borrowed or [])

    def borrow(self, book_id: str) -> None:
        self.borrowed.append(book_id)

    def release(self, book_id: str) -> None:
        """Drop ``book_id`` from the borrowed list; absent ids are ignored."""
        if book_id in self.borrowed:
            self.borrowed.remove(book_id)

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} (Member ID: {self.member_id})"
