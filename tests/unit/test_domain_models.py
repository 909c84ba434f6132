"""
Unit tests for domain models, time helpers and field validation.

Tests cover:
- User transaction reference bookkeeping
- Transaction type coercion
- Date parsing and day boundaries in the configured timezone
- Amount normalization
"""

import pytest
from datetime import date, datetime
from decimal import Decimal

import pytz

from fintrack.config.settings import Settings, set_settings, reset_settings
from fintrack.core.exceptions import ValidationError
from fintrack.core.timezone import parse_date, start_of_day, end_of_day, days_ago
from fintrack.domain.models import Transaction, TransactionType, User
from fintrack.services.validation import (
    validate_amount,
    validate_description,
    require_id,
)


class TestUserModel:
    """Tests for User reference handling."""

    def test_add_transaction_appends_once(self):
        user = User(user_id="u1", name="Alice")

        user.add_transaction("t1")
        user.add_transaction("t2")
        user.add_transaction("t1")

        assert user.transaction_ids == ["t1", "t2"]

    def test_remove_transactions_keeps_order(self):
        user = User(user_id="u1", name="Alice", transaction_ids=["t1", "t2", "t3", "t4"])

        user.remove_transactions(["t3", "t1", "missing"])

        assert user.transaction_ids == ["t2", "t4"]

    def test_default_reference_lists_are_independent(self):
        a = User(user_id="a", name="A")
        b = User(user_id="b", name="B")

        a.add_transaction("t1")

        assert b.transaction_ids == []


class TestTransactionModel:
    def test_string_type_is_coerced(self):
        txn = Transaction(
            transaction_id="t1",
            user_id="u1",
            title="Salary",
            amount=Decimal("100.00"),
            category="Income",
            date=datetime(2024, 6, 1),
            transaction_type="credit",
        )

        assert txn.transaction_type is TransactionType.CREDIT

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            Transaction(
                transaction_id="t1",
                user_id="u1",
                title="Loan",
                amount=Decimal("100.00"),
                category="Debt",
                date=datetime(2024, 6, 1),
                transaction_type="loan",
            )


class TestTimeHelpers:
    """Tests for date parsing and day boundaries."""

    @pytest.fixture(autouse=True)
    def new_york(self):
        set_settings(Settings(timezone="America/New_York", database_url="sqlite://"))
        yield
        reset_settings()

    def test_parse_iso_date_string(self):
        assert parse_date("2024-01-15") == datetime(2024, 1, 15)

    def test_parse_aware_value_converts_to_local(self):
        """
        GIVEN the application zone is America/New_York
        WHEN I parse a UTC timestamp
        THEN the stored value is New York wall-clock time
        """
        assert parse_date("2024-01-15T15:00:00Z") == datetime(2024, 1, 15, 10, 0)

    def test_parse_aware_datetime(self):
        aware = pytz.utc.localize(datetime(2024, 7, 1, 12, 0))

        assert parse_date(aware) == datetime(2024, 7, 1, 8, 0)

    def test_parse_plain_date(self):
        assert parse_date(date(2024, 3, 2)) == datetime(2024, 3, 2)

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday-ish", 42, True])
    def test_parse_invalid_returns_none(self, value):
        assert parse_date(value) is None

    def test_day_boundaries(self):
        moment = datetime(2024, 1, 31, 15, 45)

        assert start_of_day(moment) == datetime(2024, 1, 31, 0, 0)
        assert end_of_day(moment) == datetime(2024, 1, 31, 23, 59, 59, 999999)

    def test_days_ago(self):
        now = datetime(2024, 6, 15, 14, 30)

        assert days_ago(7, now=now) == datetime(2024, 6, 8)
        assert days_ago(0, now=now) == datetime(2024, 6, 15)


class TestFieldValidation:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (10, Decimal("10.00")),
            (0.1, Decimal("0.10")),
            (Decimal("19.999"), Decimal("20.00")),
            (2.005, Decimal("2.01")),
            (Decimal("9999999999999999.99"), Decimal("9999999999999999.99")),
        ],
    )
    def test_amount_normalized_to_cents(self, value, expected):
        assert validate_amount(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            0, -1, "10", None, True, float("nan"), float("inf"), Decimal("0.001"),
            1e30, 10**40, 1e300, 10**16, Decimal("9999999999999999.995"),
        ],
    )
    def test_amount_rejected(self, value):
        with pytest.raises(ValidationError):
            validate_amount(value)

    def test_blank_description_becomes_none(self):
        assert validate_description("   ") is None
        assert validate_description(" note ") == "note"

    def test_description_must_be_text(self):
        with pytest.raises(ValidationError):
            validate_description(12)

    def test_require_id(self):
        assert require_id(" abc ") == "abc"
        with pytest.raises(ValidationError):
            require_id("")
