"""
Notification entity

A record that a recipient was told about an order status change. Created once
per notified transition and never mutated afterwards.
"""

from dataclasses import dataclass, field
from datetime import datetime

from constants import NotificationDefaults, NotificationType
from domain.value_objects import OrderStatus, UniqueEntityID


@dataclass
class Notification:
    order_id: UniqueEntityID
    message: str
    type: NotificationType = NotificationType.EMAIL
    id: UniqueEntityID = field(default_factory=UniqueEntityID)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.id = UniqueEntityID.of(self.id)
        self.order_id = UniqueEntityID.of(self.order_id)
        self.type = NotificationType(self.type)

    @classmethod
    def for_status(cls, order_id: UniqueEntityID, status: OrderStatus) -> "Notification":
        """
        Build the templated notification for a status change.

        Args:
            order_id: Order the recipient is being told about
            status: Status the order moved to

        Returns:
            Unsaved Notification
        """
        return cls(
            order_id=order_id,
            message=NotificationDefaults.message_for(OrderStatus(status).value),
            type=NotificationDefaults.TYPE,
        )
