"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a money movement."""

    CREDIT = "credit"
    EXPENSE = "expense"
