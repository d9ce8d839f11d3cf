"""
Order entity

The aggregate root of the delivery lifecycle. Status changes go through the
transition methods below, which enforce the OrderStatus transition table and
keep ``deliveryman_id`` consistent with the status:

- PENDING: no deliveryman
- PICKED_UP / DELIVERED: the deliveryman who performed the pickup
- RETURNED: whatever was assigned when it was returned

All methods mutate the order in place and refresh ``updated_at``. Who may call
them is decided by the use cases in services/, not here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, List, Optional

from domain.entities.entity import Entity
from domain.entities.order_attachment import OrderAttachment
from domain.value_objects import OrderStatus, UniqueEntityID
from exceptions import (
    DeliveryPhotoIsRequiredError,
    InvalidStateTransitionError,
    OrderMustBePendingToBePickedUpError,
    OrderMustBePickedUpToBeMarkedAsDeliveredError,
)


@dataclass
class Order(Entity):
    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "recipient_id",
        "street",
        "number",
        "neighborhood",
        "city",
        "state",
        "zip_code",
    )

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    zip_code: str
    recipient_id: Optional[UniqueEntityID] = None
    deliveryman_id: Optional[UniqueEntityID] = None
    status: OrderStatus = OrderStatus.PENDING
    delivery_photos: List[OrderAttachment] = field(default_factory=list)
    id: UniqueEntityID = field(default_factory=UniqueEntityID)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.id = UniqueEntityID.of(self.id)
        self.recipient_id = UniqueEntityID.of(self.recipient_id)
        self.deliveryman_id = UniqueEntityID.of(self.deliveryman_id)
        self.status = OrderStatus(self.status)
        self._ensure_defaults()

    def is_assigned_to(self, user_id: "str | UniqueEntityID") -> bool:
        """Check whether ``user_id`` is the deliveryman holding this order."""
        return self.deliveryman_id is not None and self.deliveryman_id.equals(user_id)

    def update(self, **changes) -> list[str]:
        """Apply a partial update of recipient and address fields in place."""
        if "recipient_id" in changes:
            changes["recipient_id"] = UniqueEntityID.of(changes["recipient_id"])
        return self._apply_changes(self.UPDATABLE_FIELDS, changes)

    def pick_up(self, deliveryman_id: "str | UniqueEntityID") -> None:
        """
        Assign the order to a deliveryman and move it to PICKED_UP.

        Raises:
            OrderMustBePendingToBePickedUpError: If the order is not pending
        """
        if self.status != OrderStatus.PENDING:
            raise OrderMustBePendingToBePickedUpError(self.status.value)

        self.deliveryman_id = UniqueEntityID.of(deliveryman_id)
        self.status = OrderStatus.PICKED_UP
        self.touch()

    def mark_delivered(self, photo_ids: list[str]) -> list[OrderAttachment]:
        """
        Move a picked-up order to DELIVERED and attach its photos.

        Args:
            photo_ids: Ids of the uploaded proof-of-delivery photos

        Returns:
            The attachments created for this delivery

        Raises:
            OrderMustBePickedUpToBeMarkedAsDeliveredError: If not picked up
            DeliveryPhotoIsRequiredError: If ``photo_ids`` is empty
        """
        if self.status != OrderStatus.PICKED_UP:
            raise OrderMustBePickedUpToBeMarkedAsDeliveredError(self.status.value)
        if not photo_ids:
            raise DeliveryPhotoIsRequiredError()

        attachments = OrderAttachment.for_photos(self.id, photo_ids)
        self.status = OrderStatus.DELIVERED
        self.delivery_photos = attachments
        self.touch()
        return attachments

    def mark_returned(self) -> None:
        """Move the order to RETURNED, keeping whoever was assigned."""
        self._transition_to(OrderStatus.RETURNED)

    def reset_to_pending(self) -> None:
        """
        Admin override: put the order back to PENDING from any status.

        The deliveryman and delivery photos are cleared so the order can be
        picked up again.
        """
        self.status = OrderStatus.PENDING
        self.deliveryman_id = None
        self.delivery_photos = []
        self.touch()

    def _transition_to(self, new_status: OrderStatus) -> None:
        if not self.status.can_transition_to(new_status):
            raise InvalidStateTransitionError(self.status.value, new_status.value)
        self.status = new_status
        self.touch()
