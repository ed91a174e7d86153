"""Functional core - pure day-log logic with no I/O."""

from .dates import canonicalize, next_working_day, shift, week_keys
from .day import DayRecord, LogEntry, Section, StructuredEntry, TextEntry, entry_from_data
from .priority import DEFAULT_MARKER, priority_score, rank, rank_entries
from .render import render_day, render_week

__all__ = [
    # Dates
    "canonicalize",
    "next_working_day",
    "shift",
    "week_keys",
    # Records
    "DayRecord",
    "LogEntry",
    "Section",
    "StructuredEntry",
    "TextEntry",
    "entry_from_data",
    # Priority
    "DEFAULT_MARKER",
    "priority_score",
    "rank",
    "rank_entries",
    # Rendering
    "render_day",
    "render_week",
]
