"""
Order Request DTOs

DTOs for order management and order lifecycle use cases.
"""

from typing import Annotated, ClassVar, List, Optional

from pydantic import Field

from .base import PartialUpdateRequest, UseCaseRequest


class CreateOrderRequest(UseCaseRequest):
    """Admin creates a pending order for a recipient."""

    admin_id: str = Field(min_length=1, description="Acting admin")
    recipient_id: str = Field(min_length=1, description="Recipient the order is for")
    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    zip_code: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "admin_id": "admin-1",
                "recipient_id": "recipient-1",
                "street": "Rua das Flores",
                "number": "123",
                "neighborhood": "Centro",
                "city": "Curitiba",
                "state": "PR",
                "zip_code": "80010-000",
            }
        }
    }


class UpdateOrderRequest(PartialUpdateRequest):
    """Only the fields that are set get applied."""

    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("admin_id", "order_id")

    admin_id: str = Field(min_length=1)
    order_id: str = Field(min_length=1)
    recipient_id: Optional[str] = None
    street: Optional[str] = None
    number: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class DeleteOrderRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)
    order_id: str = Field(min_length=1)


class ListOrdersRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)


class ListNearbyOrdersRequest(UseCaseRequest):
    deliveryman_id: str = Field(min_length=1)
    neighborhood: str = Field(min_length=1, description="Neighborhood to search in")


class ListUserDeliveriesRequest(UseCaseRequest):
    deliveryman_id: str = Field(min_length=1)


class PickUpOrderRequest(UseCaseRequest):
    deliveryman_id: str = Field(min_length=1)
    order_id: str = Field(min_length=1)


class MarkOrderAsDeliveredRequest(UseCaseRequest):
    """
    Deliveryman confirms a delivery.

    Blank photo ids are rejected here. An empty ``delivery_photo_ids`` is
    accepted and rejected by the use case, after the actor and order checks.
    """

    deliveryman_id: str = Field(min_length=1)
    order_id: str = Field(min_length=1)
    delivery_photo_ids: List[Annotated[str, Field(min_length=1)]] = Field(
        default_factory=list, description="Uploaded photo ids"
    )


class MarkOrderAsReturnedRequest(UseCaseRequest):
    user_id: str = Field(min_length=1, description="Admin or assigned deliveryman")
    order_id: str = Field(min_length=1)


class MarkOrderAsPendingRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)
    order_id: str = Field(min_length=1)
