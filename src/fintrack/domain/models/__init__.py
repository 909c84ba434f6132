"""Domain models package."""

from fintrack.domain.models.enums import TransactionType
from fintrack.domain.models.user import User
from fintrack.domain.models.transaction import Transaction

__all__ = [
    "TransactionType",
    "User",
    "Transaction",
]
