"""Dependency injection for FastAPI.

FastAPI caches ``get_db`` per request, so every repository and the unit of
work built for one request share a single session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from fintrack.repositories.sqlalchemy.database import get_db
from fintrack.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyUnitOfWork,
)
from fintrack.services import (
    TransactionService,
    TransactionQueryService,
    UserService,
)
from fintrack.config.settings import get_settings


def get_user_repo(db: Session = Depends(get_db)) -> SqlAlchemyUserRepository:
    """Provide UserRepository instance."""
    return SqlAlchemyUserRepository(db)


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_unit_of_work(db: Session = Depends(get_db)) -> SqlAlchemyUnitOfWork:
    """Provide UnitOfWork instance."""
    return SqlAlchemyUnitOfWork(db)


def get_transaction_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> TransactionService:
    """Provide TransactionService instance."""
    return TransactionService(
        user_repo=user_repo,
        transaction_repo=transaction_repo,
        uow=uow,
    )


def get_query_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> TransactionQueryService:
    """Provide TransactionQueryService instance."""
    return TransactionQueryService(
        user_repo=user_repo,
        transaction_repo=transaction_repo,
        default_frequency_days=get_settings().default_frequency_days,
    )


def get_user_service(
    user_repo: SqlAlchemyUserRepository = Depends(get_user_repo),
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
) -> UserService:
    """Provide UserService instance."""
    return UserService(user_repo=user_repo, uow=uow)
