"""Pure day rendering - no I/O dependencies."""

from datetime import date, datetime
from typing import Callable

from .dates import canonicalize, relative_label, week_keys, weekday_name
from .day import DayRecord, LogEntry
from .priority import DEFAULT_MARKER, rank_entries

EMPTY_MARKER = "- empty"


def format_header(key: str, as_of: date | datetime | None = None) -> str:
    """Header line, e.g. ``# 2025-01-15 - Wednesday - TODAY``."""
    key = canonicalize(key)
    header = f"# {key} - {weekday_name(key)}"
    label = relative_label(key, as_of)
    if label:
        header += f" - {label}"
    return header


def format_entry_line(index: int, entry: LogEntry) -> str:
    return f"  {index}: {entry.render()}"


def _section_lines(title: str, entries: list[LogEntry]) -> list[str]:
    lines = [f"- {title}:"]
    lines.extend(format_entry_line(i, entry) for i, entry in enumerate(entries))
    return lines


def render_day(
    record: DayRecord,
    as_of: date | datetime | None = None,
    marker: str = DEFAULT_MARKER,
) -> str:
    """
    Render one day.

    The Done section is always shown. Todo entries are listed in priority
    order, and the indices shown are the ones accepted by rm/done.
    """
    lines = [format_header(record.date, as_of)]
    lines.extend(_section_lines("Done", record.actions))
    if record.todo:
        lines.extend(_section_lines("Todo", rank_entries(record.todo, marker)))
    return "\n".join(lines)


def _render_week_day(record: DayRecord, as_of, marker: str) -> str:
    lines = [format_header(record.date, as_of)]
    if record.actions:
        lines.extend(_section_lines("Done", record.actions))
    if record.todo:
        lines.extend(_section_lines("Todo", rank_entries(record.todo, marker)))
    if record.is_empty:
        lines.append(EMPTY_MARKER)
    return "\n".join(lines)


def render_week(
    fetch: Callable[[str], DayRecord | None],
    anchor,
    as_of: date | datetime | None = None,
    marker: str = DEFAULT_MARKER,
) -> str:
    """
    Render the 8 days ending at ``anchor``, oldest first.

    ``fetch`` returns the record stored for a key, or None when the day
    has no file. Days without entries show the empty marker.
    """
    blocks = []
    for key in week_keys(anchor):
        record = fetch(key) or DayRecord(date=key)
        blocks.append(_render_week_day(record, as_of, marker))
    return "\n\n".join(blocks)
