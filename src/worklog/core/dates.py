"""Pure calendar-day logic - no I/O dependencies."""

import re
from datetime import date, datetime, timedelta

from worklog.errors import InvalidDate

KEY_FORMAT = "%Y-%m-%d"

# Formats accepted for explicit date strings, tried in order
DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d", "%Y%m%d")

RELATIVE_DAYS = {
    "today": 0,
    "yesterday": -1,
    "tomorrow": 1,
}

_OFFSET_RE = re.compile(r"^[+-]\d+$")

FRIDAY = 4


def _today(as_of: date | datetime | None) -> date:
    if isinstance(as_of, datetime):
        return as_of.date()
    return as_of or date.today()


def _offset(day: date, days: int, value) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError:
        raise InvalidDate(f"Cannot parse date: {value!r}") from None


def _parse_string(value: str, as_of: date | datetime | None) -> date:
    text = value.strip()
    lowered = text.lower()

    if lowered in RELATIVE_DAYS:
        return _offset(_today(as_of), RELATIVE_DAYS[lowered], value)

    if _OFFSET_RE.match(text):
        return _offset(_today(as_of), int(text), value)

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidDate(f"Cannot parse date: {value!r}") from None
    return _local_date(parsed)


def _local_date(value: datetime) -> date:
    """Calendar date of a datetime in the local timezone."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def canonicalize(value, as_of: date | datetime | None = None) -> str:
    """
    Normalize a date-like value to a ``YYYY-MM-DD`` key.

    Accepts dates, datetimes, integer day offsets relative to ``as_of``,
    and strings (explicit dates, ``today``/``yesterday``/``tomorrow``,
    or signed offsets like ``+2``). ``as_of`` defaults to the local date.
    """
    # bool is an int subclass, never a day offset
    if isinstance(value, bool):
        raise InvalidDate(f"Cannot parse date: {value!r}")

    if isinstance(value, datetime):
        day = _local_date(value)
    elif isinstance(value, date):
        day = value
    elif isinstance(value, int):
        day = _offset(_today(as_of), value, value)
    elif isinstance(value, str):
        day = _parse_string(value, as_of)
    else:
        raise InvalidDate(f"Cannot parse date: {value!r}")

    return day.strftime(KEY_FORMAT)


def to_date(key) -> date:
    """Convert a key (or anything canonicalizable) to a date."""
    return datetime.strptime(canonicalize(key), KEY_FORMAT).date()


def shift(key, days: int) -> str:
    """Key for the day ``days`` after ``key`` (negative for before)."""
    return canonicalize(_offset(to_date(key), days, key))


def next_working_day(key) -> str:
    """Default procrastination target: the next day, or Monday from a Friday."""
    if to_date(key).weekday() == FRIDAY:
        return shift(key, 3)
    return shift(key, 1)


def week_keys(anchor) -> list[str]:
    """The 8 keys from 7 days before ``anchor`` through ``anchor``, oldest first."""
    return [shift(anchor, -offset) for offset in range(7, -1, -1)]


def weekday_name(key) -> str:
    return to_date(key).strftime("%A")


def relative_label(key, as_of: date | datetime | None = None) -> str | None:
    """Return TODAY or TOMORROW when ``key`` falls on one of those days."""
    day = to_date(key)
    today = _today(as_of)
    if day == today:
        return "TODAY"
    if day == today + timedelta(days=1):
        return "TOMORROW"
    return None
