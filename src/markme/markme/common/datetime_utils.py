from __future__ import annotations

from datetime import date, datetime
from typing import Union

from ..core.constants import DATE_KEY_FORMAT

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or an ISO date-time) string into date."""
    value = value.strip()
    # Only the day matters; any time part (fractions, offsets, Z) is ignored.
    if len(value) > 10 and value[10] not in "T ":
        raise ValueError(f"Invalid date string: {value!r}")
    return datetime.strptime(value[:10], DATE_KEY_FORMAT).date()


def to_calendar_date(value: DateLike) -> date:
    """Reduce any accepted date input to day granularity."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise TypeError(f"Unsupported date value type: {type(value)!r}")


def format_date_key(value: DateLike) -> str:
    """Key used by the by-date index."""
    return to_calendar_date(value).strftime(DATE_KEY_FORMAT)


def format_record_date(value: date) -> str:
    # Stored as a midnight date-time, e.g. 2024-01-10T00:00:00
    return datetime.combine(value, datetime.min.time()).isoformat()
