"""
Response DTOs

Use cases return domain entities directly; a response DTO exists only where
the caller must not see the entity (login never exposes the password hash).
"""

from .auth_response import LoginResponse

__all__ = ["LoginResponse"]
