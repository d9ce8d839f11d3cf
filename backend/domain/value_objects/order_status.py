"""
OrderStatus Value Object

Immutable representation of an order's stage in the delivery lifecycle.
"""

from enum import Enum
from typing import Set


class OrderStatus(str, Enum):
    """
    Immutable order status enum.

    Lifecycle:
    - PENDING: Created by an admin, waiting for a deliveryman
    - PICKED_UP: Collected by the deliveryman now assigned to it
    - DELIVERED: Handed over, with at least one proof-of-delivery photo
    - RETURNED: Sent back; reachable from any status

    An admin may reset any order back to PENDING. That override is not part of
    the regular transition table; see Order.reset_to_pending.
    """

    PENDING = "pending"
    PICKED_UP = "picked_up"
    DELIVERED = "delivered"
    RETURNED = "returned"

    def allowed_transitions(self) -> Set["OrderStatus"]:
        """Statuses reachable from this one without the admin override."""
        valid_transitions = {
            OrderStatus.PENDING: {OrderStatus.PICKED_UP, OrderStatus.RETURNED},
            OrderStatus.PICKED_UP: {OrderStatus.DELIVERED, OrderStatus.RETURNED},
            OrderStatus.DELIVERED: {OrderStatus.RETURNED},
            OrderStatus.RETURNED: {OrderStatus.RETURNED},
        }
        return valid_transitions[self]

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """
        Check if transition to new status is valid.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return new_status in self.allowed_transitions()

    @classmethod
    def from_string(cls, value: str) -> "OrderStatus":
        """
        Create OrderStatus from string value.

        Args:
            value: String representation

        Returns:
            OrderStatus instance

        Raises:
            ValueError: If value is not a valid status
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid order status: {value}")
