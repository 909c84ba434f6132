"""SQLAlchemy implementation of TransactionRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy import and_

from fintrack.core.timezone import now_local
from fintrack.domain.models import Transaction, TransactionType
from fintrack.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction repository. Writes are flushed, not committed."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        orm_txn = self._to_orm(transaction)
        self._db.add(orm_txn)
        self._db.flush()
        return self._to_domain(orm_txn)

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction_id
        ).first()
        return self._to_domain(orm_txn) if orm_txn else None

    def get_owned(self, transaction_id: str, user_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID only if it belongs to ``user_id``."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction_id,
            TransactionORM.user_id == user_id,
        ).first()
        return self._to_domain(orm_txn) if orm_txn else None

    def update(self, transaction: Transaction) -> Transaction:
        """Update an existing transaction."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction.transaction_id
        ).first()
        if not orm_txn:
            raise ValueError(f"Transaction not found: {transaction.transaction_id}")

        orm_txn.title = transaction.title
        orm_txn.amount = transaction.amount
        orm_txn.category = transaction.category
        orm_txn.description = transaction.description
        orm_txn.date = transaction.date
        orm_txn.transaction_type = transaction.transaction_type
        orm_txn.updated_at = transaction.updated_at

        self._db.flush()
        return self._to_domain(orm_txn)

    def delete(self, transaction_id: str) -> None:
        """Delete a transaction."""
        self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction_id
        ).delete(synchronize_session="fetch")
        self._db.flush()

    def delete_many(self, transaction_ids: list[str], user_id: str) -> list[str]:
        """Delete the listed transactions owned by ``user_id``; return deleted IDs."""
        if not transaction_ids:
            return []
        owned = (
            self._db.query(TransactionORM.transaction_id)
            .filter(
                TransactionORM.transaction_id.in_(transaction_ids),
                TransactionORM.user_id == user_id,
            )
            .all()
        )
        deleted_ids = [row.transaction_id for row in owned]
        if deleted_ids:
            self._db.query(TransactionORM).filter(
                TransactionORM.transaction_id.in_(deleted_ids)
            ).delete(synchronize_session="fetch")
            self._db.flush()
        return deleted_ids

    def query(
        self,
        user_id: str,
        transaction_type: Optional[TransactionType] = None,
        date_after: Optional[datetime] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """Query a user's transactions, newest first."""
        conditions = [TransactionORM.user_id == user_id]
        if transaction_type:
            conditions.append(TransactionORM.transaction_type == transaction_type)
        if date_after:
            conditions.append(TransactionORM.date > date_after)
        if start_date:
            conditions.append(TransactionORM.date >= start_date)
        if end_date:
            conditions.append(TransactionORM.date <= end_date)

        query = (
            self._db.query(TransactionORM)
            .filter(and_(*conditions))
            .order_by(
                TransactionORM.date.desc(),
                TransactionORM.created_at.desc(),
                TransactionORM.transaction_id,
            )
        )
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _to_orm(txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model."""
        return TransactionORM(
            transaction_id=txn.transaction_id,
            user_id=txn.user_id,
            title=txn.title,
            amount=txn.amount,
            category=txn.category,
            description=txn.description,
            date=txn.date,
            transaction_type=txn.transaction_type,
            created_at=txn.created_at or now_local(),
            updated_at=txn.updated_at,
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            transaction_id=orm.transaction_id,
            user_id=orm.user_id,
            title=orm.title,
            amount=Decimal(str(orm.amount)),
            category=orm.category,
            description=orm.description,
            date=orm.date,
            transaction_type=orm.transaction_type,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
