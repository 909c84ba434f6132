"""User domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    Owner of transactions.

    ``transaction_ids`` is the ordered list of references to the
    transactions this user owns. The stores do not enforce it; the
    transaction service keeps it in step with the ``user_id`` field of
    each transaction.
    """

    user_id: str
    name: str
    email: Optional[str] = None
    transaction_ids: list[str] = field(default_factory=list)
    created_at: Optional[datetime] = field(default=None)

    def add_transaction(self, transaction_id: str) -> None:
        """Append a reference unless it is already present."""
        if transaction_id not in self.transaction_ids:
            self.transaction_ids.append(transaction_id)

    def remove_transactions(self, transaction_ids: list[str]) -> None:
        """Drop every reference whose id is in ``transaction_ids``."""
        removed = set(transaction_ids)
        self.transaction_ids = [t for t in self.transaction_ids if t not in removed]
