class CirculationError(Exception):
    """Base exception for circulation desk errors."""


class NotFoundError(CirculationError, LookupError):
    """Requested book or member id does not exist."""

    def __init__(self, message: str, kind: str = "book") -> None:
        super().__init__(message)
        self.kind = kind


class AlreadyIssuedError(CirculationError):
    """Book is already issued to a member."""


class NotIssuedError(CirculationError):
    """Book is not currently issued, so it cannot be returned."""


class LogUnavailableError(CirculationError, OSError):
    """Activity log file could not be written."""
