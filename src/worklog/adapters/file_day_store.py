"""File-based day storage adapter."""

import logging
from pathlib import Path

import yaml

from worklog.core.dates import canonicalize
from worklog.core.day import DayRecord
from worklog.core.priority import DEFAULT_MARKER, rank_entries
from worklog.errors import CorruptRecord, WriteFailure

logger = logging.getLogger(__name__)


def dump_record(record: DayRecord) -> str:
    """Serialize a record as YAML with sorted keys."""
    return yaml.safe_dump(
        record.to_data(),
        sort_keys=True,
        default_flow_style=False,
        allow_unicode=True,
    )


def parse_record(text: str, key: str) -> DayRecord:
    """Parse YAML day file content. Raises ValueError or yaml.YAMLError."""
    return DayRecord.from_data(yaml.safe_load(text), key)


class FileDayStore:
    """
    File-based day storage.

    Implements DayStore protocol. Each day gets a YAML file named after
    its key. Records are read fresh on every access.
    """

    def __init__(
        self,
        root: Path | str,
        priority_marker: str = DEFAULT_MARKER,
        extension: str = "yml",
    ):
        self.root = Path(root).expanduser()
        self.priority_marker = priority_marker
        self.extension = extension.lstrip(".")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteFailure(f"Could not create data directory {self.root}: {e}") from e

    def path_for(self, key) -> Path:
        """Get the file path for a given day."""
        return self.root / f"{canonicalize(key)}.{self.extension}"

    def exists(self, key) -> bool:
        return self.path_for(key).exists()

    def get(self, key) -> DayRecord | None:
        """Read a day's record. Returns None if the file does not exist."""
        key = canonicalize(key)
        path = self.path_for(key)
        if not path.exists():
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptRecord(path, f"unreadable: {e}") from e

        try:
            record = parse_record(text, key)
        except (yaml.YAMLError, ValueError) as e:
            raise CorruptRecord(path, str(e)) from e

        logger.debug(f"Loaded {path}")
        return record

    def get_or_create(self, key) -> DayRecord:
        """Read a day's record, storing an empty one first if there is none."""
        key = canonicalize(key)
        record = self.get(key)
        if record is not None:
            return record

        record = DayRecord(date=key)
        self.save(key, record)
        logger.debug(f"Created empty day {key}")
        return record

    def save(self, key, record: DayRecord) -> None:
        """Write a day's record, re-sorting its todo list by priority."""
        path = self.path_for(key)

        if record.actions is None:
            record.actions = []
        if record.todo:
            record.todo = rank_entries(record.todo, self.priority_marker)

        try:
            path.write_text(dump_record(record), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise WriteFailure(f"Could not write {path}: {e}") from e

        logger.debug(f"Saved {path}")
