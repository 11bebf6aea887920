from typing import Dict, Optional

from circulation.exceptions import NotFoundError
from circulation.member import Member


class Directory:
    """In-memory member store keyed by member id."""

    def __init__(self) -> None:
        self._members: Dict[str, Member] = {}

    def add(self, member: Member) -> None:
        self._members[member.member_id] = member

    def get(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def require(self, member_id: str, message: str = "Member not found.") -> Member:
        member = self.get(member_id)
        if member is None:
            raise NotFoundError(message, kind="member")
        return member

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._members
