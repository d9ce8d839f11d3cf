"""
Notification Request DTOs
"""

from pydantic import Field

from domain.value_objects import OrderStatus

from .base import UseCaseRequest


class NotifyRecipientRequest(UseCaseRequest):
    order_id: str = Field(min_length=1, description="Order whose recipient is notified")
    status: OrderStatus = Field(description="Status the order moved to")
