"""
Repository layer for data access abstraction.

This package contains the persistence ports the use cases depend on and two
adapters for them: in-memory (tests, default wiring) and SQLAlchemy.
"""

from .base_repository import BaseRepository
from .interfaces import (
    NotificationsRepository,
    OrdersRepository,
    RecipientsRepository,
    UsersRepository,
)
from .in_memory import (
    InMemoryNotificationsRepository,
    InMemoryOrdersRepository,
    InMemoryRecipientsRepository,
    InMemoryUsersRepository,
)
from .sqlalchemy_repositories import (
    SqlAlchemyNotificationsRepository,
    SqlAlchemyOrdersRepository,
    SqlAlchemyRecipientsRepository,
    SqlAlchemyUsersRepository,
)

__all__ = [
    "BaseRepository",
    "UsersRepository",
    "OrdersRepository",
    "RecipientsRepository",
    "NotificationsRepository",
    "InMemoryUsersRepository",
    "InMemoryOrdersRepository",
    "InMemoryRecipientsRepository",
    "InMemoryNotificationsRepository",
    "SqlAlchemyUsersRepository",
    "SqlAlchemyOrdersRepository",
    "SqlAlchemyRecipientsRepository",
    "SqlAlchemyNotificationsRepository",
]
