"""User repository protocol."""

from typing import Protocol, Optional

from fintrack.domain.models import User


class UserRepository(Protocol):
    """Interface for user data access."""

    def create(self, user: User) -> User:
        """Persist a new user."""
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Retrieve user by ID, including its transaction references."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve user by email."""
        ...

    def update(self, user: User) -> User:
        """Persist user fields and its ordered transaction references."""
        ...
