"""In-memory store shared by the in-memory repositories."""

import copy
from dataclasses import dataclass, field
from typing import Optional

from fintrack.domain.models import Transaction, User


@dataclass
class InMemoryStore:
    """Plain dictionaries keyed by ID, plus a committed snapshot for rollback."""

    users: dict[str, User] = field(default_factory=dict)
    transactions: dict[str, Transaction] = field(default_factory=dict)
    _snapshot: Optional[tuple[dict, dict]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.checkpoint()

    def checkpoint(self) -> None:
        """Record the current state as committed."""
        self._snapshot = (copy.deepcopy(self.users), copy.deepcopy(self.transactions))

    def restore(self) -> None:
        """Return to the last committed state."""
        users, transactions = self._snapshot
        self.users = copy.deepcopy(users)
        self.transactions = copy.deepcopy(transactions)
