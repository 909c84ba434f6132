"""User service for registering and looking up transaction owners."""

import logging
import uuid
from typing import Any, Optional

from fintrack.core.timezone import now_local
from fintrack.core.exceptions import ValidationError, NotFoundError
from fintrack.domain.models import User
from fintrack.repositories.protocols import UserRepository, UnitOfWork

logger = logging.getLogger(__name__)


class UserService:
    """Service for user records. Users are never deleted."""

    def __init__(self, user_repo: UserRepository, uow: UnitOfWork):
        self._user_repo = user_repo
        self._uow = uow

    def create_user(self, name: Any, email: Optional[Any] = None) -> User:
        """
        Create a new user with an empty transaction list.

        Args:
            name: Display name, non-empty
            email: Optional; must be unique when given
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name must be a non-empty string")
        if email is not None:
            if not isinstance(email, str) or "@" not in email:
                raise ValidationError("Please provide a valid email")
            email = email.strip().lower()
            if self._user_repo.get_by_email(email):
                raise ValidationError(f"User with email '{email}' already exists")

        user = User(
            user_id=str(uuid.uuid4()),
            name=name.strip(),
            email=email,
            created_at=now_local(),
        )
        try:
            created = self._user_repo.create(user)
            self._uow.commit()
        except Exception:
            self._uow.rollback()
            raise

        logger.info("Created user %s", created.user_id)
        return created

    def get_user(self, user_id: str) -> User:
        """Get user by ID."""
        user = self._user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user
