"""SQLAlchemy repository implementations."""

from fintrack.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    reset_database,
    Base,
)
from fintrack.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from fintrack.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from fintrack.repositories.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyUserRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyUnitOfWork",
]
