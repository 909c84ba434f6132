"""SQLAlchemy implementation of UserRepository."""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fintrack.core.exceptions import ValidationError
from fintrack.core.timezone import now_local
from fintrack.domain.models import User
from fintrack.repositories.sqlalchemy.orm_models import UserORM, UserTransactionRefORM


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository. Writes are flushed, not committed."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Persist a new user."""
        orm_user = UserORM(
            user_id=user.user_id,
            name=user.name,
            email=user.email,
            created_at=user.created_at or now_local(),
            transaction_refs=[
                UserTransactionRefORM(transaction_id=t) for t in user.transaction_ids
            ],
        )
        self._db.add(orm_user)
        try:
            self._db.flush()
        except IntegrityError:
            # Lost a race on the unique email
            raise ValidationError(f"User with email '{user.email}' already exists")
        return self._to_domain(orm_user)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID, including its transaction references."""
        orm_user = self._db.query(UserORM).filter(UserORM.user_id == user_id).first()
        return self._to_domain(orm_user) if orm_user else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by email."""
        orm_user = self._db.query(UserORM).filter(UserORM.email == email).first()
        return self._to_domain(orm_user) if orm_user else None

    def update(self, user: User) -> User:
        """Persist user fields and its ordered transaction references."""
        orm_user = self._db.query(UserORM).filter(UserORM.user_id == user.user_id).first()
        if not orm_user:
            raise ValueError(f"User not found: {user.user_id}")

        orm_user.name = user.name
        orm_user.email = user.email

        # Kept refs retain their row (and position); dropped ones are orphan-deleted
        existing = {ref.transaction_id: ref for ref in orm_user.transaction_refs}
        orm_user.transaction_refs = [
            existing.get(t) or UserTransactionRefORM(transaction_id=t)
            for t in user.transaction_ids
        ]

        self._db.flush()
        return self._to_domain(orm_user)

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        """Convert ORM model to domain model."""
        return User(
            user_id=orm.user_id,
            name=orm.name,
            email=orm.email,
            transaction_ids=[ref.transaction_id for ref in orm.transaction_refs],
            created_at=orm.created_at,
        )
