"""Day-log operations shared by the CLI.

Each mutating operation loads a fresh record from the store, changes it,
and writes it back. Load, change and save are separate steps with no file
lock, so two processes editing the same day at once can lose an update.
"""

import logging
from datetime import date, datetime

from .adapters.file_day_store import FileDayStore
from .config import Config
from .core.dates import canonicalize, next_working_day
from .core.day import DayRecord, Section, TextEntry
from .core.priority import rank_entries
from .core.render import render_day, render_week
from .errors import NotFound
from .ports.day_store import DayStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> FileDayStore:
    """Resolve the day store from config."""
    return FileDayStore(
        config.data_path,
        priority_marker=config.priority_marker,
        extension=config.file_extension,
    )


def _displayed_todo(store: DayStore, record: DayRecord) -> None:
    """Put todo entries in the order render_day shows them."""
    if record.todo:
        record.todo = rank_entries(record.todo, store.priority_marker)


def append(store: DayStore, key, section: Section | str, text: str) -> DayRecord:
    """Add an entry to a day's actions or todo list."""
    key = canonicalize(key)
    section = Section(section)
    record = store.get_or_create(key)
    record.add(section, TextEntry(text))
    store.save(key, record)
    logger.debug(f"Added to {key} {section.value}: {text!r}")
    return record


def remove(store: DayStore, key, section: Section | str, index: int) -> DayRecord:
    """
    Remove an entry by its displayed index.

    Raises NotFound, without touching the file, if there is no entry at
    that index.
    """
    key = canonicalize(key)
    section = Section(section)
    record = store.get_or_create(key)
    _displayed_todo(store, record)

    entries = record.entries(section)
    if not 0 <= index < len(entries):
        raise NotFound("Not found")

    record.pop(section, index)
    store.save(key, record)
    return record


def complete(store: DayStore, key, index: int) -> DayRecord:
    """Move a todo entry (by displayed index) to the end of the day's actions."""
    key = canonicalize(key)
    record = store.get_or_create(key)
    _displayed_todo(store, record)

    if not 0 <= index < len(record.entries(Section.TODO)):
        raise NotFound("Todo not found")

    record.add(Section.ACTIONS, record.pop(Section.TODO, index))
    store.save(key, record)
    return record


def procrastinate(store: DayStore, key, target=None) -> str:
    """
    Move all of a day's todo entries to another day.

    The target defaults to the next day, or the following Monday when
    ``key`` is a Friday. Moved entries go after the target's own todo
    entries. Returns the target key.
    """
    key = canonicalize(key)
    target = canonicalize(target) if target is not None else next_working_day(key)

    if target == key:
        logger.info(f"Procrastination target is {key} itself, nothing to move")
        return target

    target_record = store.get_or_create(target)
    record = store.get_or_create(key)

    if record.todo:
        moved = len(record.todo)
        for entry in record.todo:
            target_record.add(Section.TODO, entry)
        store.save(target, target_record)

        record.todo = None
        store.save(key, record)
        logger.info(f"Moved {moved} todo entries from {key} to {target}")

    return target


def new_day(store: DayStore, key) -> DayRecord:
    """Make sure a day has a file."""
    return store.get_or_create(canonicalize(key))


def show_day(store: DayStore, key, as_of: date | datetime | None = None) -> str:
    record = store.get_or_create(canonicalize(key))
    return render_day(record, as_of=as_of, marker=store.priority_marker)


def show_week(store: DayStore, key, as_of: date | datetime | None = None) -> str:
    """Render the week ending at ``key`` without creating files for empty days."""
    return render_week(store.get, canonicalize(key), as_of=as_of, marker=store.priority_marker)
