"""Domain layer - pure business models with no external dependencies."""

from fintrack.domain.models import (
    User,
    Transaction,
    TransactionType,
)

__all__ = [
    "User",
    "Transaction",
    "TransactionType",
]
