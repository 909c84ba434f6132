"""Unit of work protocol."""

from typing import Protocol


class UnitOfWork(Protocol):
    """Commit boundary shared by the repositories of one request."""

    def commit(self) -> None:
        """Make all pending repository writes durable."""
        ...

    def rollback(self) -> None:
        """Discard all pending repository writes."""
        ...
