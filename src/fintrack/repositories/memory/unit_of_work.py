"""In-memory implementation of UnitOfWork."""

from fintrack.repositories.memory.store import InMemoryStore


class InMemoryUnitOfWork:
    """Checkpoints the store on commit and restores it on rollback."""

    def __init__(self, store: InMemoryStore):
        self._store = store
        self.commits = 0

    def commit(self) -> None:
        self._store.checkpoint()
        self.commits += 1

    def rollback(self) -> None:
        self._store.restore()
