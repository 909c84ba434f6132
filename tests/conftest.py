"""
Pytest configuration and fixtures for finance tracker tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory repository fixtures for fast service tests
- Factory helpers for users and transactions
- A fixed clock for relative date filters
- Service and repository fixtures
"""

import os

# Keep the app's own engine off the user's home directory during tests
os.environ.setdefault("FINTRACK_DATABASE_URL", "sqlite://")

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from fintrack.main import app
from fintrack.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from fintrack.repositories.sqlalchemy import orm_models  # noqa: F401
from fintrack.repositories.sqlalchemy import (
    SqlAlchemyUserRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyUnitOfWork,
)
from fintrack.repositories.memory import (
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryTransactionRepository,
    InMemoryUnitOfWork,
)
from fintrack.services import (
    TransactionService,
    TransactionQueryService,
    TransactionCreate,
    UserService,
)
from fintrack.domain.models import Transaction, TransactionType, User
from fintrack.config.settings import reset_settings


# =============================================================================
# TIME HELPERS
# =============================================================================


def local_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a naive local datetime, as stored by the repositories."""
    return datetime(year, month, day, hour, minute, second)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return local_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()
    reset_database()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    reset_database()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def user_repo(test_session) -> SqlAlchemyUserRepository:
    """Provide test UserRepository."""
    return SqlAlchemyUserRepository(test_session)


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    """Provide test TransactionRepository."""
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def uow(test_session) -> SqlAlchemyUnitOfWork:
    """Provide test UnitOfWork."""
    return SqlAlchemyUnitOfWork(test_session)


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Provide an empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def memory_user_repo(memory_store) -> InMemoryUserRepository:
    return InMemoryUserRepository(memory_store)


@pytest.fixture
def memory_transaction_repo(memory_store) -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository(memory_store)


@pytest.fixture
def memory_uow(memory_store) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(memory_store)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def user_service(user_repo, uow) -> UserService:
    """Provide test UserService."""
    return UserService(user_repo=user_repo, uow=uow)


@pytest.fixture
def transaction_service(user_repo, transaction_repo, uow) -> TransactionService:
    """Provide test TransactionService backed by SQLite."""
    return TransactionService(
        user_repo=user_repo,
        transaction_repo=transaction_repo,
        uow=uow,
    )


@pytest.fixture
def query_service(user_repo, transaction_repo, fixed_now) -> TransactionQueryService:
    """Provide test TransactionQueryService backed by SQLite with a fixed clock."""
    return TransactionQueryService(
        user_repo=user_repo,
        transaction_repo=transaction_repo,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def memory_user_service(memory_user_repo, memory_uow) -> UserService:
    return UserService(user_repo=memory_user_repo, uow=memory_uow)


@pytest.fixture
def memory_transaction_service(
    memory_user_repo,
    memory_transaction_repo,
    memory_uow,
) -> TransactionService:
    """Provide TransactionService backed by the in-memory store."""
    return TransactionService(
        user_repo=memory_user_repo,
        transaction_repo=memory_transaction_repo,
        uow=memory_uow,
    )


@pytest.fixture
def memory_query_service(
    memory_user_repo,
    memory_transaction_repo,
    fixed_now,
) -> TransactionQueryService:
    """Provide TransactionQueryService backed by the in-memory store."""
    return TransactionQueryService(
        user_repo=memory_user_repo,
        transaction_repo=memory_transaction_repo,
        clock=lambda: fixed_now,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def user_factory(user_service) -> Callable[..., User]:
    """Factory for creating test users."""

    def _create_user(name: Optional[str] = None, email: Optional[str] = None) -> User:
        if name is None:
            name = f"Test User {uuid.uuid4().hex[:8]}"
        return user_service.create_user(name=name, email=email)

    return _create_user


@pytest.fixture
def transaction_factory(transaction_service) -> Callable[..., Transaction]:
    """Factory for creating test transactions through the service."""

    def _create_transaction(
        user_id: str,
        transaction_type: TransactionType = TransactionType.EXPENSE,
        amount: Decimal = Decimal("25.00"),
        date: Optional[datetime] = None,
        title: str = "Coffee beans",
        category: str = "Groceries",
        description: Optional[str] = None,
    ) -> Transaction:
        return transaction_service.add_transaction(create_transaction_data(
            user_id=user_id,
            transaction_type=transaction_type,
            amount=amount,
            date=date or local_datetime(2024, 6, 14),
            title=title,
            category=category,
            description=description,
        ))

    return _create_transaction


@pytest.fixture
def sample_user(user_factory) -> User:
    """Create a sample user."""
    return user_factory(name="Alice", email="alice@example.com")


@pytest.fixture
def other_user(user_factory) -> User:
    """Create a second user for ownership tests."""
    return user_factory(name="Bob", email="bob@example.com")


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def create_transaction_data(
    user_id: str,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    amount: Decimal = Decimal("25.00"),
    date: Optional[datetime] = None,
    title: str = "Coffee beans",
    category: str = "Groceries",
    description: Optional[str] = None,
) -> TransactionCreate:
    """Helper to build valid TransactionCreate input."""
    return TransactionCreate(
        title=title,
        amount=amount,
        date=date or local_datetime(2024, 6, 14),
        category=category,
        transaction_type=transaction_type,
        user_id=user_id,
        description=description,
    )
