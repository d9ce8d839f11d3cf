"""
User role and status value objects.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role an actor plays in the back office."""

    ADMIN = "admin"
    DELIVERYMAN = "deliveryman"

    @property
    def plural(self) -> str:
        """Plural label used in authorization messages."""
        return {
            UserRole.ADMIN: "admins",
            UserRole.DELIVERYMAN: "deliverymen",
        }[self]


class UserStatus(str, Enum):
    """Users are deactivated, never deleted."""

    ACTIVE = "active"
    INACTIVE = "inactive"
