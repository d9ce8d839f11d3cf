"""
Request DTOs

Flat, validated field sets passed to ``UseCase.execute``. Structural checks
(non-empty ids, cpf shape, coordinate ranges) happen here; business rules stay
in the use cases.
"""

from .base import PartialUpdateRequest, UseCaseRequest
from .notification_request import NotifyRecipientRequest
from .order_request import (
    CreateOrderRequest,
    DeleteOrderRequest,
    ListNearbyOrdersRequest,
    ListOrdersRequest,
    ListUserDeliveriesRequest,
    MarkOrderAsDeliveredRequest,
    MarkOrderAsPendingRequest,
    MarkOrderAsReturnedRequest,
    PickUpOrderRequest,
    UpdateOrderRequest,
)
from .recipient_request import (
    CreateRecipientRequest,
    DeleteRecipientRequest,
    ListRecipientsRequest,
    UpdateRecipientRequest,
)
from .user_request import (
    ChangeUserPasswordRequest,
    CreateDeliverymanRequest,
    DeactivateDeliverymanRequest,
    ListDeliverymenRequest,
    LoginUserRequest,
    UpdateDeliverymanRequest,
)

__all__ = [
    "UseCaseRequest",
    "PartialUpdateRequest",
    "NotifyRecipientRequest",
    "CreateOrderRequest",
    "UpdateOrderRequest",
    "DeleteOrderRequest",
    "ListOrdersRequest",
    "ListNearbyOrdersRequest",
    "ListUserDeliveriesRequest",
    "PickUpOrderRequest",
    "MarkOrderAsDeliveredRequest",
    "MarkOrderAsReturnedRequest",
    "MarkOrderAsPendingRequest",
    "CreateRecipientRequest",
    "UpdateRecipientRequest",
    "DeleteRecipientRequest",
    "ListRecipientsRequest",
    "CreateDeliverymanRequest",
    "UpdateDeliverymanRequest",
    "DeactivateDeliverymanRequest",
    "ListDeliverymenRequest",
    "ChangeUserPasswordRequest",
    "LoginUserRequest",
]
