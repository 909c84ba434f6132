"""Time utilities for day boundaries and date parsing.

Datetimes are stored as naive wall-clock values in the configured zone
(``Settings.timezone``), which is how SQLite round-trips them.
"""

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

import pytz
from dateutil import parser as date_parser

from fintrack.config.settings import get_settings


def get_timezone() -> pytz.BaseTzInfo:
    """Return the configured application timezone."""
    return pytz.timezone(get_settings().timezone)


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to a naive wall-clock value in the application zone."""
    if dt.tzinfo is None:
        # Naive values are assumed to already be local
        return dt
    return dt.astimezone(get_timezone()).replace(tzinfo=None)


def now_local() -> datetime:
    """Return the current time as naive local wall-clock time."""
    return datetime.now(get_timezone()).replace(tzinfo=None)


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date-like value into a naive local datetime.

    Accepts ``datetime``, ``date`` and strings understood by dateutil
    (ISO 8601 included). Returns None when the value is missing or not
    parseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return to_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError):
        return None
    return to_local(parsed)


def start_of_day(dt: datetime) -> datetime:
    """Return midnight at the start of the day containing ``dt``."""
    return datetime.combine(dt.date(), time.min)


def end_of_day(dt: datetime) -> datetime:
    """Return the last representable instant of the day containing ``dt``."""
    return datetime.combine(dt.date(), time.max)


def days_ago(days: int, now: Optional[datetime] = None) -> datetime:
    """Return the start of the day ``days`` days before ``now``."""
    reference = now or now_local()
    return start_of_day(reference - timedelta(days=days))
