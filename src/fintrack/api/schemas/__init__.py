"""Pydantic schemas for API request/response."""

from fintrack.api.schemas.common import ApiModel, MessageResponse, ErrorResponse
from fintrack.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionListRequest,
    TransactionOwnerRequest,
    TransactionUpdateRequest,
    TransactionBulkDeleteRequest,
    TransactionResponse,
    TransactionMutationResponse,
    TransactionDetailResponse,
    TransactionListResponse,
    TransactionBulkDeleteResponse,
)
from fintrack.api.schemas.user import (
    UserCreateRequest,
    UserResponse,
    UserDetailResponse,
)

__all__ = [
    "ApiModel",
    "MessageResponse",
    "ErrorResponse",
    "TransactionCreateRequest",
    "TransactionListRequest",
    "TransactionOwnerRequest",
    "TransactionUpdateRequest",
    "TransactionBulkDeleteRequest",
    "TransactionResponse",
    "TransactionMutationResponse",
    "TransactionDetailResponse",
    "TransactionListResponse",
    "TransactionBulkDeleteResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserDetailResponse",
]
