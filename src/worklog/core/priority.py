"""Todo priority ordering - pure functions."""

from typing import Iterable

from .day import LogEntry

DEFAULT_MARKER = "!"


def priority_score(text: str, marker: str = DEFAULT_MARKER) -> int:
    """Number of non-overlapping occurrences of ``marker`` in ``text``."""
    if not marker:
        return 0
    return text.count(marker)


def rank(items: Iterable[str], marker: str = DEFAULT_MARKER) -> list[str]:
    """
    Sort todo texts by marker count, most marked first.

    Returns a new list. Items with equal scores keep their relative order.
    """
    return sorted(items, key=lambda item: -priority_score(item, marker))


def rank_entries(entries: Iterable[LogEntry], marker: str = DEFAULT_MARKER) -> list[LogEntry]:
    """Same ordering as rank(), scored on each entry's rendered text."""
    return sorted(entries, key=lambda entry: -priority_score(entry.render(), marker))
