"""
Append-only activity log for the circulation desk.

Every mutating operation (adding a book or member, issuing, returning) writes
one plain-text line such as ``Issued Book: B1 to Member M1``. Writing is best
effort: ``append`` never raises, it reports the failure and moves on.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from circulation.config import settings
from circulation.exceptions import LogUnavailableError

logger = logging.getLogger(__name__)

UNAVAILABLE_NOTICE = "Unable to write log."


class ActivityLog:
    """Best-effort text sink for audit lines."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        notify: Callable[[str], None] = print,
    ) -> None:
        self.path = Path(path or settings.log_file)
        self._notify = notify

    def write(self, line: str) -> None:
        """Append ``line`` to the log file, raising LogUnavailableError on failure."""
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise LogUnavailableError(f"Could not write to {self.path}: {e}") from e

    def append(self, line: str) -> bool:
        """Append ``line``; returns False (after a console notice) if it could not be written."""
        try:
            self.write(line)
        except LogUnavailableError as e:
            logger.warning(f"Activity log unavailable: {e}")
            self._notify(UNAVAILABLE_NOTICE)
            return False
        logger.debug(f"Activity logged: {line}")
        return True

    def read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f if line.strip()]
