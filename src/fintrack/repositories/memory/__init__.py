"""In-memory repository implementations."""

from fintrack.repositories.memory.store import InMemoryStore
from fintrack.repositories.memory.user_repo import InMemoryUserRepository
from fintrack.repositories.memory.transaction_repo import InMemoryTransactionRepository
from fintrack.repositories.memory.unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryTransactionRepository",
    "InMemoryUnitOfWork",
]
