"""Error types raised by the worklog core."""


class WorklogError(Exception):
    """Base class for worklog failures."""


class InvalidDate(WorklogError, ValueError):
    """Date input could not be parsed."""


class CorruptRecord(WorklogError):
    """A day file exists but does not hold a valid day record."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt day file {path}: {reason}")


class WriteFailure(WorklogError):
    """A day file could not be written."""


class NotFound(WorklogError):
    """Index or section is absent. Reported to the user, not fatal."""
