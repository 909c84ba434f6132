"""In-memory implementation of TransactionRepository."""

import copy
from datetime import datetime
from typing import Optional

from fintrack.core.timezone import now_local
from fintrack.domain.models import Transaction, TransactionType
from fintrack.repositories.memory.store import InMemoryStore


class InMemoryTransactionRepository:
    """Dictionary-backed transaction repository for tests and scripting."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    def create(self, transaction: Transaction) -> Transaction:
        stored = copy.deepcopy(transaction)
        stored.created_at = stored.created_at or now_local()
        self._store.transactions[transaction.transaction_id] = stored
        return copy.deepcopy(stored)

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        txn = self._store.transactions.get(transaction_id)
        return copy.deepcopy(txn) if txn else None

    def get_owned(self, transaction_id: str, user_id: str) -> Optional[Transaction]:
        txn = self._store.transactions.get(transaction_id)
        if txn is None or txn.user_id != user_id:
            return None
        return copy.deepcopy(txn)

    def update(self, transaction: Transaction) -> Transaction:
        if transaction.transaction_id not in self._store.transactions:
            raise ValueError(f"Transaction not found: {transaction.transaction_id}")
        self._store.transactions[transaction.transaction_id] = copy.deepcopy(transaction)
        return copy.deepcopy(transaction)

    def delete(self, transaction_id: str) -> None:
        self._store.transactions.pop(transaction_id, None)

    def delete_many(self, transaction_ids: list[str], user_id: str) -> list[str]:
        deleted = []
        for txn_id in dict.fromkeys(transaction_ids):
            txn = self._store.transactions.get(txn_id)
            if txn is not None and txn.user_id == user_id:
                del self._store.transactions[txn_id]
                deleted.append(txn_id)
        return deleted

    def query(
        self,
        user_id: str,
        transaction_type: Optional[TransactionType] = None,
        date_after: Optional[datetime] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        matches = [
            t for t in self._store.transactions.values()
            if t.user_id == user_id
            and (transaction_type is None or t.transaction_type == transaction_type)
            and (date_after is None or t.date > date_after)
            and (start_date is None or t.date >= start_date)
            and (end_date is None or t.date <= end_date)
        ]
        # date desc, created_at desc, then id asc
        matches.sort(key=lambda t: t.transaction_id)
        matches.sort(key=lambda t: (t.date, t.created_at or datetime.min), reverse=True)
        return [copy.deepcopy(t) for t in matches]
