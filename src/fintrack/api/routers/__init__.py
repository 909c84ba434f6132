"""API routers package."""

from fintrack.api.routers.transactions import router as transactions_router
from fintrack.api.routers.users import router as users_router

__all__ = [
    "transactions_router",
    "users_router",
]
