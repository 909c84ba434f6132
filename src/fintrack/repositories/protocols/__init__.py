"""Repository protocol definitions (interfaces)."""

from fintrack.repositories.protocols.user_repo import UserRepository
from fintrack.repositories.protocols.transaction_repo import TransactionRepository
from fintrack.repositories.protocols.unit_of_work import UnitOfWork

__all__ = [
    "UserRepository",
    "TransactionRepository",
    "UnitOfWork",
]
