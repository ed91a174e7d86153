"""Day record model - no I/O dependencies."""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from .dates import canonicalize

logger = logging.getLogger(__name__)


class Section(str, Enum):
    """The two entry lists of a day."""

    ACTIONS = "actions"
    TODO = "todo"


@dataclass
class TextEntry:
    """A plain text log line."""

    text: str

    def render(self) -> str:
        return self.text

    def to_data(self) -> str:
        return self.text


@dataclass
class StructuredEntry:
    """A non-string value found in a hand-edited day file."""

    value: Any

    def render(self) -> str:
        """Compact JSON dump of the value."""
        return json.dumps(self.value, separators=(",", ":"), ensure_ascii=False, default=str)

    def to_data(self) -> Any:
        return self.value


LogEntry = TextEntry | StructuredEntry


def entry_from_data(value: Any) -> LogEntry:
    """Wrap a raw YAML value in the matching entry type."""
    if isinstance(value, str):
        return TextEntry(value)
    return StructuredEntry(value)


def _entries(data: dict, name: str) -> list[LogEntry]:
    raw = data.get(name)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"'{name}' must be a list, got {type(raw).__name__}")
    return [entry_from_data(value) for value in raw]


@dataclass
class DayRecord:
    """
    Everything logged for one calendar day.

    ``actions`` keeps insertion order. ``todo`` is kept in priority order
    by the store and is None when there is nothing to do.
    """

    date: str
    actions: list[LogEntry] = field(default_factory=list)
    todo: list[LogEntry] | None = None

    def __post_init__(self):
        if self.actions is None:
            self.actions = []
        if not self.todo:
            self.todo = None

    @property
    def is_empty(self) -> bool:
        return not self.actions and not self.todo

    def entries(self, section: Section) -> list[LogEntry]:
        """Entries of a section (empty list if absent)."""
        if section is Section.TODO:
            return self.todo or []
        return self.actions

    def add(self, section: Section, entry: LogEntry) -> None:
        if section is Section.TODO:
            if self.todo is None:
                self.todo = []
            self.todo.append(entry)
        else:
            self.actions.append(entry)

    def pop(self, section: Section, index: int) -> LogEntry:
        """Remove and return an entry. Drops the todo section once it empties."""
        entries = self.entries(section)
        entry = entries.pop(index)
        if section is Section.TODO and not entries:
            self.todo = None
        return entry

    def to_data(self) -> dict:
        """Plain structure for serialization. Empty todo is left out."""
        data: dict[str, Any] = {
            "date": self.date,
            "actions": [entry.to_data() for entry in self.actions],
        }
        if self.todo:
            data["todo"] = [entry.to_data() for entry in self.todo]
        return data

    @classmethod
    def from_data(cls, data: dict, key: str) -> "DayRecord":
        """Build a record from a parsed day file stored under ``key``."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")

        key = canonicalize(key)
        raw_date = data.get("date")
        # Unquoted YAML dates load as date objects
        if isinstance(raw_date, date):
            raw_date = raw_date.isoformat()
        if raw_date is not None and raw_date != key:
            logger.warning(f"Day file for {key} says date {raw_date!r}, using {key}")

        return cls(
            date=key,
            actions=_entries(data, "actions"),
            todo=_entries(data, "todo") or None,
        )
