"""
User Request DTOs

DTOs for deliveryman management, password changes and login.
"""

import re
from typing import ClassVar, Optional

from pydantic import Field, field_validator

from .base import PartialUpdateRequest, UseCaseRequest

CPF_PATTERN = re.compile(r"^\d{11}$")

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _normalize_cpf(value: str) -> str:
    """Strip punctuation (``123.456.789-01``) and require 11 digits."""
    digits = re.sub(r"[.\-\s]", "", value)
    if not CPF_PATTERN.match(digits):
        raise ValueError("cpf must contain exactly 11 digits")
    return digits


def _check_password_length(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


class CreateDeliverymanRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1, description="Acting admin")
    name: str = Field(min_length=1)
    cpf: str = Field(description="Brazilian taxpayer id, used as login")
    password: str = Field(min_length=1, description="Plaintext, hashed before storage")
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        return _normalize_cpf(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return _check_password_length(v)


class UpdateDeliverymanRequest(PartialUpdateRequest):
    """Only the fields that are set get applied."""

    KEY_FIELDS: ClassVar[tuple[str, ...]] = ("admin_id", "deliveryman_id")

    admin_id: str = Field(min_length=1)
    deliveryman_id: str = Field(min_length=1)
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class DeactivateDeliverymanRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)
    deliveryman_id: str = Field(min_length=1)


class ListDeliverymenRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)


class ChangeUserPasswordRequest(UseCaseRequest):
    admin_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1, description="User whose password changes")
    new_password: str = Field(min_length=1)

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, v: str) -> str:
        return _check_password_length(v)


class LoginUserRequest(UseCaseRequest):
    cpf: str
    password: str

    @field_validator("cpf")
    @classmethod
    def validate_cpf(cls, v: str) -> str:
        return _normalize_cpf(v)
