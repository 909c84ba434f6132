"""SQLAlchemy implementation of UnitOfWork."""

from sqlalchemy.orm import Session


class SqlAlchemyUnitOfWork:
    """Commits or rolls back the session shared by the request's repositories."""

    def __init__(self, db: Session):
        self._db = db

    def commit(self) -> None:
        self._db.commit()

    def rollback(self) -> None:
        self._db.rollback()
