"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fintrack.domain.models.enums import TransactionType


@dataclass
class Transaction:
    """
    A single credit or expense belonging to one user.

    - amount is always positive; direction comes from transaction_type
    - date is naive local wall-clock time
    """

    transaction_id: str
    user_id: str
    title: str
    amount: Decimal
    category: str
    date: datetime
    transaction_type: TransactionType
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.transaction_type, str):
            self.transaction_type = TransactionType(self.transaction_type)
