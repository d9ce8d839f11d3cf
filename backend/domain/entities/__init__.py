"""
Domain Entities

Entities are business objects with identity and lifecycle.
They are mutable and have a unique identifier that persists through their lifetime.

- Order: A delivery moving through the status lifecycle (aggregate root)
- OrderAttachment: Proof-of-delivery photo linked to an order
- Recipient: Who receives an order
- User: Admin or deliveryman acting on the back office
- Notification: Record of a recipient being told about a status change
"""

from .notification import Notification
from .order import Order
from .order_attachment import OrderAttachment
from .recipient import Recipient
from .user import User

__all__ = [
    "Notification",
    "Order",
    "OrderAttachment",
    "Recipient",
    "User",
]
