"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from fintrack.core.timezone import now_local
from fintrack.repositories.sqlalchemy.database import Base
from fintrack.domain.models.enums import TransactionType


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_local)

    transaction_refs = relationship(
        "UserTransactionRefORM",
        order_by="UserTransactionRefORM.position",
        cascade="all, delete-orphan",
    )


class TransactionORM(Base):
    """SQLAlchemy model for Transaction."""

    __tablename__ = "transactions"

    transaction_id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    amount = Column(Numeric(precision=18, scale=2), nullable=False)
    category = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
    transaction_type = Column(SqlEnum(TransactionType), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_local)
    updated_at = Column(DateTime, nullable=True, onupdate=now_local)


class UserTransactionRefORM(Base):
    """Ordered reference from a user to one of its transactions."""

    __tablename__ = "user_transaction_refs"

    position = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    transaction_id = Column(String(36), nullable=False, index=True)
