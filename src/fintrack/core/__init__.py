"""Core utilities and shared functionality."""

from fintrack.core.timezone import (
    get_timezone,
    now_local,
    to_local,
    parse_date,
    start_of_day,
    end_of_day,
    days_ago,
)
from fintrack.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
)

__all__ = [
    "get_timezone",
    "now_local",
    "to_local",
    "parse_date",
    "start_of_day",
    "end_of_day",
    "days_ago",
    "AppError",
    "ValidationError",
    "NotFoundError",
]
