"""Adapters - I/O implementations of ports."""

from .file_day_store import FileDayStore

__all__ = [
    "FileDayStore",
]
