#!/usr/bin/env python3
"""
Generate realistic sample data for the last 3 months.
Simulates a single user's salary credits and day-to-day expenses.
"""

import random
from datetime import datetime, date, timedelta
from decimal import Decimal

from fintrack.repositories.sqlalchemy import (
    init_db,
    get_session,
    SqlAlchemyUserRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyUnitOfWork,
)
from fintrack.services import TransactionService, TransactionCreate, UserService


# Expense categories with (min, max) amounts
EXPENSES = [
    ("Groceries", "Weekly groceries", (40, 160)),
    ("Dining", "Dinner out", (15, 90)),
    ("Transport", "Fuel", (30, 80)),
    ("Utilities", "Electricity bill", (60, 140)),
    ("Entertainment", "Cinema", (10, 40)),
    ("Health", "Pharmacy", (5, 60)),
]


def generate_sample_data() -> None:
    """Create one user and about 90 days of credits and expenses."""
    init_db()
    db = get_session()
    try:
        user_repo = SqlAlchemyUserRepository(db)
        transaction_repo = SqlAlchemyTransactionRepository(db)
        uow = SqlAlchemyUnitOfWork(db)
        user_service = UserService(user_repo=user_repo, uow=uow)
        transaction_service = TransactionService(
            user_repo=user_repo,
            transaction_repo=transaction_repo,
            uow=uow,
        )

        user = user_service.create_user(name="Sample User")
        print(f"✓ User created: {user.user_id}")

        today = date.today()
        start_date = today - timedelta(days=90)
        print(f"\nGenerating transactions from {start_date} to {today}")
        print("=" * 60)

        count = 0
        current = start_date
        while current <= today:
            if current.day == 1:
                transaction_service.add_transaction(TransactionCreate(
                    title="Salary",
                    amount=Decimal("4200.00"),
                    date=datetime.combine(current, datetime.min.time().replace(hour=9)),
                    category="Salary",
                    transaction_type="credit",
                    user_id=user.user_id,
                    description="Monthly salary",
                ))
                count += 1

            for _ in range(random.randint(0, 2)):
                category, title, (low, high) = random.choice(EXPENSES)
                amount = Decimal(str(round(random.uniform(low, high), 2)))
                transaction_service.add_transaction(TransactionCreate(
                    title=title,
                    amount=amount,
                    date=datetime.combine(
                        current,
                        datetime.min.time().replace(hour=random.randint(8, 21)),
                    ),
                    category=category,
                    transaction_type="expense",
                    user_id=user.user_id,
                ))
                count += 1

            current += timedelta(days=1)

        print(f"✓ Generated {count} transactions for user {user.user_id}")
    finally:
        db.close()


if __name__ == "__main__":
    generate_sample_data()
