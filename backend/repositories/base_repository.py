"""
Base repository providing common row-level operations over an ORM table.
"""

import logging
from typing import Generic, TypeVar, List, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import DatabaseError
from .specifications import Specification

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository over one SQLAlchemy model.

    The port adapters in sqlalchemy_repositories.py hold one of these per
    table and translate between rows and domain entities.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a row by its primary key.

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, id)

    def get_all(self) -> List[T]:
        """Retrieve every row, oldest first."""
        return self.db.query(self.model).order_by(self.model.created_at).all()

    def find(self, spec: Specification) -> List[T]:
        """
        Retrieve the rows matching a specification, oldest first.

        Args:
            spec: Specification whose SQL filter targets this model
        """
        return (
            self.db.query(self.model)
            .filter(spec.to_sql_filter())
            .order_by(self.model.created_at)
            .all()
        )

    def first(self, spec: Specification) -> Optional[T]:
        """Retrieve the first row matching a specification."""
        return self.db.query(self.model).filter(spec.to_sql_filter()).first()

    def add(self, obj: T) -> T:
        """Stage a new row."""
        self.db.add(obj)
        return obj

    def merge(self, obj: T) -> T:
        """Stage the state of a detached row over the stored one."""
        return self.db.merge(obj)

    def remove(self, obj: T) -> None:
        """Stage deletion of a row."""
        self.db.delete(obj)

    def commit(self, operation: str) -> None:
        """
        Commit staged changes, rolling back on failure.

        Args:
            operation: Name used in the error and log line

        Raises:
            DatabaseError: If the database rejects the changes
        """
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{operation} failed on {self.model.__tablename__}: {e}")
            raise DatabaseError(operation, f"Failed to {operation}: {e}") from e
