"""
Auth Response DTOs

DTOs returned by the login use case.
"""

from pydantic import BaseModel, ConfigDict, Field

from domain.value_objects import UserRole


class LoginResponse(BaseModel):
    """
    Identity of a user whose credentials checked out.

    No token is issued; the caller decides what a session looks like.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(description="Authenticated user id")
    role: UserRole = Field(description="Role of the authenticated user")
