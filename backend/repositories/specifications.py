"""
Specification Pattern

Query criteria that can be evaluated two ways: against a domain entity held
in memory (``is_satisfied_by``) and as a SQLAlchemy filter over the matching
ORM table (``to_sql_filter``). Both adapters share the same specification so
listing behaviour cannot drift between them.

Specifications compose with ``&``.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import and_

T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    A single query criterion over entities of type T.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check a domain entity against this criterion.

        Args:
            candidate: Entity to check

        Returns:
            True if the entity matches
        """
        pass

    @abstractmethod
    def to_sql_filter(self):
        """
        Express this criterion as a SQLAlchemy filter over the ORM model.

        Returns:
            SQLAlchemy boolean clause
        """
        pass

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    """Both criteria must hold."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())

