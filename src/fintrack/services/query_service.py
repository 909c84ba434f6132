"""Read-side service for listing and fetching transactions."""

import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional

from fintrack.core.timezone import (
    days_ago,
    end_of_day,
    now_local,
    parse_date,
    start_of_day,
)
from fintrack.core.exceptions import ValidationError, NotFoundError
from fintrack.domain.models import Transaction, TransactionType
from fintrack.repositories.protocols import UserRepository, TransactionRepository
from fintrack.services.validation import require_id, validate_transaction_type

ALL_TYPES = "all"
CUSTOM_FREQUENCY = "custom"
DEFAULT_FREQUENCY_DAYS = 7

_DIGITS = re.compile(r"^\d+$")


def parse_frequency(frequency: Any, default: int = DEFAULT_FREQUENCY_DAYS) -> int:
    """
    Interpret a relative window as a number of days.

    Non-negative integers (or their text form) are used as-is; anything
    else falls back to ``default``.
    """
    if isinstance(frequency, bool):
        return default
    if isinstance(frequency, int):
        return frequency if frequency >= 0 else default
    if isinstance(frequency, (float, Decimal)):
        try:
            whole = int(frequency)
        except (ValueError, OverflowError):
            return default
        return whole if whole >= 0 and whole == frequency else default
    if isinstance(frequency, str) and _DIGITS.match(frequency.strip()):
        return int(frequency.strip())
    return default


class TransactionQueryService:
    """
    Service for querying a user's transactions.

    Filters by owner, optionally by type, and by either a relative window
    ("last N days") or an explicit custom date range. Results are newest
    first.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        transaction_repo: TransactionRepository,
        default_frequency_days: int = DEFAULT_FREQUENCY_DAYS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._user_repo = user_repo
        self._transaction_repo = transaction_repo
        self._default_frequency_days = default_frequency_days
        self._clock = clock

    def list_transactions(
        self,
        user_id: Any,
        transaction_type: Any = ALL_TYPES,
        frequency: Any = None,
        start_date: Any = None,
        end_date: Any = None,
    ) -> list[Transaction]:
        """
        List the user's transactions matching the filters.

        Args:
            user_id: Owner; must resolve to an existing user
            transaction_type: "credit", "expense" or "all" (missing means all)
            frequency: "custom", or a non-negative day count (default 7)
            start_date: First day of a custom range (inclusive)
            end_date: Last day of a custom range (inclusive)
        """
        user_id = require_id(user_id)
        if not self._user_repo.get_by_id(user_id):
            raise NotFoundError("User", user_id)

        txn_type = self._resolve_type(transaction_type)

        if frequency == CUSTOM_FREQUENCY:
            start, end = self._resolve_custom_range(start_date, end_date)
            return self._transaction_repo.query(
                user_id=user_id,
                transaction_type=txn_type,
                start_date=start,
                end_date=end,
            )

        days = parse_frequency(frequency, self._default_frequency_days)
        return self._transaction_repo.query(
            user_id=user_id,
            transaction_type=txn_type,
            date_after=days_ago(days, now=self._clock()),
        )

    def get_transaction(self, transaction_id: Any, user_id: Any) -> Transaction:
        """
        Fetch one transaction owned by the user.

        A transaction owned by someone else is reported exactly like a
        missing one.
        """
        transaction_id = require_id(transaction_id, "Transaction ID and User ID are required")
        user_id = require_id(user_id, "Transaction ID and User ID are required")

        transaction = self._transaction_repo.get_owned(transaction_id, user_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    @staticmethod
    def _resolve_type(transaction_type: Any) -> Optional[TransactionType]:
        if transaction_type is None or transaction_type == "" or transaction_type == ALL_TYPES:
            return None
        return validate_transaction_type(transaction_type)

    @staticmethod
    def _resolve_custom_range(start_date: Any, end_date: Any) -> tuple[datetime, datetime]:
        start = parse_date(start_date)
        end = parse_date(end_date)
        if start is None or end is None:
            raise ValidationError("Custom frequency requires a valid startDate and endDate")
        start, end = start_of_day(start), end_of_day(end)
        if start > end:
            raise ValidationError("startDate must not be after endDate")
        return start, end
