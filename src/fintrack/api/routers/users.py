"""User endpoints."""

from fastapi import APIRouter, Depends

from fintrack.api.deps import get_user_service
from fintrack.api.schemas import UserCreateRequest, UserResponse, UserDetailResponse
from fintrack.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserDetailResponse)
def create_user(
    data: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Create a new user."""
    user = service.create_user(name=data.name, email=data.email)
    return UserDetailResponse(
        message="User created successfully",
        user=UserResponse.model_validate(user),
    )


@router.get("/{user_id}", response_model=UserDetailResponse)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Get a user and its transaction references."""
    return UserDetailResponse(user=UserResponse.model_validate(service.get_user(user_id)))
