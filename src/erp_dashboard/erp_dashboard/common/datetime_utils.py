from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional, Union

from ..core.constants import DATE_FORMAT, NOT_AVAILABLE, TIME_DISPLAY_FORMAT

_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M:%S %p")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def coerce_date(value: Union[date, str, None]) -> Optional[date]:
    """Accept a date, a datetime or a YYYY-MM-DD string (ISO timestamps are cut to the date part)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip()[:10])


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as produced by the backend (``Z`` suffix allowed)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def parse_wall_clock(value) -> time:
    """Parse a wall-clock-of-day value such as ``09:00`` or ``05:00 PM``."""
    if isinstance(value, time):
        return value
    text = str(value).strip().upper()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: {value!r}")


def format_clock(value: Union[datetime, time, None]) -> str:
    """``09:15 AM`` style display; missing values render as N/A."""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime(TIME_DISPLAY_FORMAT)


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= 5
