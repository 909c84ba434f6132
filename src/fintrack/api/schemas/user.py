"""Pydantic schemas for user endpoints."""

from datetime import datetime
from typing import Any, Optional

from fintrack.api.schemas.common import ApiModel


class UserCreateRequest(ApiModel):
    """Request schema for creating a user."""

    name: Any = None
    email: Any = None


class UserResponse(ApiModel):
    """Response schema for a single user."""

    user_id: str
    name: str
    email: Optional[str] = None
    transaction_ids: list[str]
    created_at: Optional[datetime] = None


class UserDetailResponse(ApiModel):
    """Envelope around a user."""

    success: bool = True
    message: Optional[str] = None
    user: UserResponse
