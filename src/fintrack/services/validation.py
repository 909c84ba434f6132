"""Input validation shared by the transaction services.

Each check returns the normalized value or raises ValidationError with a
message specific to the field.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from fintrack.core.exceptions import ValidationError
from fintrack.core.timezone import parse_date
from fintrack.domain.models import TransactionType

TITLE_MESSAGE = "Title must be a non-empty string"
AMOUNT_MESSAGE = "Amount must be a positive number"
DATE_MESSAGE = "Please provide a valid date"
CATEGORY_MESSAGE = "Category must be a non-empty string"
TYPE_MESSAGE = "Transaction type must be either 'credit' or 'expense'"
DESCRIPTION_MESSAGE = "Description must be a string"
USER_ID_MESSAGE = "User ID is required"

_CENT = Decimal("0.01")
# Upper bound of Numeric(18, 2)
_MAX_AMOUNT = Decimal(10) ** 16


def _non_empty_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def validate_title(value: Any) -> str:
    return _non_empty_text(value, TITLE_MESSAGE)


def validate_category(value: Any) -> str:
    return _non_empty_text(value, CATEGORY_MESSAGE)


def validate_amount(value: Any) -> Decimal:
    """
    Accept int, float or Decimal strictly greater than zero and below
    10**16; strings are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValidationError(AMOUNT_MESSAGE)
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(AMOUNT_MESSAGE)
    if not amount.is_finite() or amount <= 0 or amount >= _MAX_AMOUNT:
        raise ValidationError(AMOUNT_MESSAGE)
    amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if amount <= 0 or amount >= _MAX_AMOUNT:
        raise ValidationError(AMOUNT_MESSAGE)
    return amount


def validate_date(value: Any) -> datetime:
    parsed = parse_date(value)
    if parsed is None:
        raise ValidationError(DATE_MESSAGE)
    return parsed


def validate_transaction_type(value: Any) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType(value)
    except (ValueError, TypeError):
        raise ValidationError(TYPE_MESSAGE)


def validate_description(value: Any) -> Optional[str]:
    """Descriptions are optional; empty text is stored as None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(DESCRIPTION_MESSAGE)
    return value.strip() or None


def require_id(value: Any, message: str = USER_ID_MESSAGE) -> str:
    """Return the identifier as text, or raise when it is missing."""
    if value is None or isinstance(value, bool):
        raise ValidationError(message)
    text = str(value).strip()
    if not text:
        raise ValidationError(message)
    return text
