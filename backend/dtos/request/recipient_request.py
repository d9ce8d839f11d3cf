"""
Recipient Request DTOs

DTOs for the admin-only recipient CRUD use cases.
"""

from typing import ClassVar, Optional

from pydantic import Field

from .base import PartialUpdateRequest, UseCaseRequest


class CreateRecipientRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1, description="Acting admin")
    name: str = Field(min_length=1)
    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    zip_code: str
    phone: Optional[str] = None
    email: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class UpdateRecipientRequest(PartialUpdateRequest):
    """Only the fields that are set get applied."""

    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("admin_id", "recipient_id")

    admin_id: str = Field(min_length=1)
    recipient_id: str = Field(min_length=1)
    name: Optional[str] = None
    street: Optional[str] = None
    number: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class DeleteRecipientRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)
    recipient_id: str = Field(min_length=1)


class ListRecipientsRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)
