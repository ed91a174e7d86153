"""Day storage interface."""

from pathlib import Path
from typing import Protocol

from worklog.core.day import DayRecord


class DayStore(Protocol):
    """Interface for reading and writing one record per calendar day."""

    priority_marker: str

    def path_for(self, key: str) -> Path:
        """Storage address for a day key."""
        ...

    def exists(self, key: str) -> bool:
        """Check if a record is stored for a day."""
        ...

    def get(self, key: str) -> DayRecord | None:
        """Read a day's record. Returns None if not stored."""
        ...

    def get_or_create(self, key: str) -> DayRecord:
        """Read a day's record, creating and storing an empty one if missing."""
        ...

    def save(self, key: str, record: DayRecord) -> None:
        """Write/overwrite a day's record."""
        ...
