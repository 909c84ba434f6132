"""Pydantic schemas for transaction endpoints.

Request fields are loosely typed on purpose: the services validate them in
a fixed order and report one message per field.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from fintrack.api.schemas.common import ApiModel
from fintrack.domain.models.enums import TransactionType


class TransactionCreateRequest(ApiModel):
    """Request schema for adding a transaction."""

    title: Any = None
    amount: Any = None
    description: Any = None
    date: Any = None
    category: Any = None
    transaction_type: Any = None
    user_id: Any = None


class TransactionListRequest(ApiModel):
    """Request schema for listing a user's transactions."""

    user_id: Any = None
    type: Any = "all"
    frequency: Any = None
    start_date: Any = None
    end_date: Any = None


class TransactionOwnerRequest(ApiModel):
    """Request body carrying only the acting user."""

    user_id: Any = None


class TransactionUpdateRequest(ApiModel):
    """Request schema for updating a transaction (partial update)."""

    title: Any = None
    description: Any = None
    amount: Any = None
    category: Any = None
    transaction_type: Any = None
    date: Any = None
    user_id: Optional[str] = None


class TransactionBulkDeleteRequest(ApiModel):
    """Request schema for deleting several transactions."""

    transaction_ids: Any = None
    user_id: Any = None


class TransactionResponse(ApiModel):
    """Response schema for a single transaction."""

    transaction_id: str
    user_id: str
    title: str
    amount: Decimal
    category: str
    description: Optional[str] = None
    date: datetime
    transaction_type: TransactionType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransactionMutationResponse(ApiModel):
    """Acknowledgement carrying the affected transaction."""

    success: bool = True
    message: str
    transaction: TransactionResponse


class TransactionDetailResponse(ApiModel):
    """Response schema for fetching one transaction."""

    success: bool = True
    transaction: TransactionResponse


class TransactionListResponse(ApiModel):
    """Response schema for listing transactions."""

    success: bool = True
    transactions: list[TransactionResponse]
    count: int


class TransactionBulkDeleteResponse(ApiModel):
    """Response schema for bulk deletes."""

    success: bool = True
    message: str
    deleted_count: int
