"""Repository layer - data access abstractions and implementations."""

from fintrack.repositories.protocols import (
    UserRepository,
    TransactionRepository,
    UnitOfWork,
)

__all__ = [
    "UserRepository",
    "TransactionRepository",
    "UnitOfWork",
]
