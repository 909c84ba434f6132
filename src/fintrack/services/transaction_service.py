"""Transaction service for creating, editing and deleting transactions."""

import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from fintrack.core.timezone import now_local
from fintrack.core.exceptions import ValidationError, NotFoundError
from fintrack.domain.models import Transaction, User
from fintrack.repositories.protocols import (
    UserRepository,
    TransactionRepository,
    UnitOfWork,
)
from fintrack.services.validation import (
    require_id,
    validate_amount,
    validate_category,
    validate_date,
    validate_description,
    validate_title,
    validate_transaction_type,
)

logger = logging.getLogger(__name__)


@dataclass
class TransactionCreate:
    """Raw input for creating a transaction; validated by the service."""

    title: Any = None
    amount: Any = None
    date: Any = None
    category: Any = None
    transaction_type: Any = None
    user_id: Any = None
    description: Any = None


@dataclass
class TransactionUpdate:
    """Partial update data. ``None`` means the field was not supplied."""

    title: Optional[Any] = None
    description: Optional[Any] = None
    amount: Optional[Any] = None
    category: Optional[Any] = None
    transaction_type: Optional[Any] = None
    date: Optional[Any] = None


class TransactionService:
    """
    Service for mutating transactions.

    Every operation that touches both stores keeps the owning user's
    ``transaction_ids`` in step with the transaction records, and commits
    both writes through one unit of work.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        transaction_repo: TransactionRepository,
        uow: UnitOfWork,
    ):
        self._user_repo = user_repo
        self._transaction_repo = transaction_repo
        self._uow = uow

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        """
        Validate and record a new transaction for a user.

        Fields are checked in a fixed order (title, amount, date, category,
        type, user) and the first failure is reported.
        """
        title = validate_title(data.title)
        amount = validate_amount(data.amount)
        txn_date = validate_date(data.date)
        category = validate_category(data.category)
        txn_type = validate_transaction_type(data.transaction_type)
        user_id = require_id(data.user_id)
        description = validate_description(data.description)

        user = self._get_user(user_id)

        now = now_local()
        transaction = Transaction(
            transaction_id=str(uuid.uuid4()),
            user_id=user.user_id,
            title=title,
            amount=amount,
            category=category,
            date=txn_date,
            transaction_type=txn_type,
            description=description,
            created_at=now,
            updated_at=now,
        )

        with self._atomic():
            created = self._transaction_repo.create(transaction)
            user.add_transaction(created.transaction_id)
            self._user_repo.update(user)

        logger.info(
            "Added %s transaction %s for user %s",
            created.transaction_type.value, created.transaction_id, user.user_id,
        )
        return created

    def edit_transaction(
        self,
        transaction_id: str,
        patch: TransactionUpdate,
        user_id: Optional[str] = None,
    ) -> Transaction:
        """
        Apply a partial update.

        Only supplied fields change, and each supplied value is validated
        like on creation. When ``user_id`` is given the transaction must
        belong to that user.
        """
        transaction_id = require_id(transaction_id, "Transaction ID is required")
        if user_id is not None:
            transaction = self._transaction_repo.get_owned(transaction_id, user_id)
        else:
            transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)

        if patch.title is not None:
            transaction.title = validate_title(patch.title)
        if patch.description is not None:
            transaction.description = validate_description(patch.description)
        if patch.amount is not None:
            transaction.amount = validate_amount(patch.amount)
        if patch.category is not None:
            transaction.category = validate_category(patch.category)
        if patch.transaction_type is not None:
            transaction.transaction_type = validate_transaction_type(patch.transaction_type)
        if patch.date is not None:
            transaction.date = validate_date(patch.date)

        transaction.updated_at = now_local()

        with self._atomic():
            updated = self._transaction_repo.update(transaction)

        logger.info("Updated transaction %s", transaction_id)
        return updated

    def delete_transaction(self, transaction_id: str, user_id: str) -> None:
        """Delete one transaction owned by the user and drop its reference."""
        user_id = require_id(user_id)
        transaction_id = require_id(transaction_id, "Transaction ID is required")
        user = self._get_user(user_id)

        transaction = self._transaction_repo.get_owned(transaction_id, user.user_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)

        with self._atomic():
            self._transaction_repo.delete(transaction_id)
            user.remove_transactions([transaction_id])
            self._user_repo.update(user)

        logger.info("Deleted transaction %s for user %s", transaction_id, user.user_id)

    def delete_transactions(self, transaction_ids: Any, user_id: str) -> int:
        """
        Delete every listed transaction that the user owns.

        IDs belonging to other users (or to nothing) are ignored. Returns
        the number of deleted records; raises NotFoundError when that
        number is zero.
        """
        if not isinstance(transaction_ids, (list, tuple)) or not transaction_ids:
            raise ValidationError("Please provide valid transaction IDs")
        ids = [str(t) for t in transaction_ids if t is not None]
        if not ids:
            raise ValidationError("Please provide valid transaction IDs")

        user = self._get_user(require_id(user_id))

        with self._atomic():
            deleted_ids = self._transaction_repo.delete_many(ids, user.user_id)
            if not deleted_ids:
                raise NotFoundError(
                    "Transactions", user.user_id, message="No transactions found to delete"
                )
            user.remove_transactions(deleted_ids)
            self._user_repo.update(user)

        logger.info("Deleted %d transactions for user %s", len(deleted_ids), user.user_id)
        return len(deleted_ids)

    def _get_user(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    @contextmanager
    def _atomic(self) -> Iterator[None]:
        """Commit the unit of work on success, roll it back on any error."""
        try:
            yield
        except Exception:
            self._uow.rollback()
            raise
        self._uow.commit()
