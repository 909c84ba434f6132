"""Transaction repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from fintrack.domain.models import Transaction, TransactionType


class TransactionRepository(Protocol):
    """Interface for transaction data access."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        ...

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        ...

    def get_owned(self, transaction_id: str, user_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID only if it belongs to ``user_id``."""
        ...

    def update(self, transaction: Transaction) -> Transaction:
        """Update an existing transaction."""
        ...

    def delete(self, transaction_id: str) -> None:
        """Delete a transaction (hard delete)."""
        ...

    def delete_many(self, transaction_ids: list[str], user_id: str) -> list[str]:
        """Delete the listed transactions owned by ``user_id``; return deleted IDs."""
        ...

    def query(
        self,
        user_id: str,
        transaction_type: Optional[TransactionType] = None,
        date_after: Optional[datetime] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """
        Query a user's transactions, newest first.

        ``date_after`` is an exclusive lower bound; ``start_date`` and
        ``end_date`` are inclusive.
        """
        ...
