"""In-memory implementation of UserRepository."""

import copy
from typing import Optional

from fintrack.core.timezone import now_local
from fintrack.domain.models import User
from fintrack.repositories.memory.store import InMemoryStore


class InMemoryUserRepository:
    """Dictionary-backed user repository for tests and scripting."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    def create(self, user: User) -> User:
        stored = copy.deepcopy(user)
        stored.created_at = stored.created_at or now_local()
        self._store.users[user.user_id] = stored
        return copy.deepcopy(stored)

    def get_by_id(self, user_id: str) -> Optional[User]:
        user = self._store.users.get(user_id)
        return copy.deepcopy(user) if user else None

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._store.users.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    def update(self, user: User) -> User:
        if user.user_id not in self._store.users:
            raise ValueError(f"User not found: {user.user_id}")
        self._store.users[user.user_id] = copy.deepcopy(user)
        return copy.deepcopy(user)
