"""Service layer - business logic orchestration."""

from fintrack.services.transaction_service import (
    TransactionService,
    TransactionCreate,
    TransactionUpdate,
)
from fintrack.services.query_service import TransactionQueryService, parse_frequency
from fintrack.services.user_service import UserService

__all__ = [
    "TransactionService",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionQueryService",
    "parse_frequency",
    "UserService",
]
