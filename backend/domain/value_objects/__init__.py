"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

- UniqueEntityID: Opaque identifier for entities and references
- OrderStatus: Lifecycle stage of an order, with its transition table
- UserRole / UserStatus: Who an actor is and whether they may act
"""

from .order_status import OrderStatus
from .unique_entity_id import UniqueEntityID
from .user_role import UserRole, UserStatus

__all__ = [
    "OrderStatus",
    "UniqueEntityID",
    "UserRole",
    "UserStatus",
]
