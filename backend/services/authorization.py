"""
Actor authorization

Every use case starts by resolving the acting user and checking that it is
active and holds one of the roles the operation allows. The check is done
once per call; nothing is cached.
"""

from typing import Optional, Type

from domain.entities import User
from domain.value_objects import UserRole
from exceptions import UnauthorizedError
from repositories.interfaces import UsersRepository
from utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)


def is_active_with_role(user: Optional[User], *roles: UserRole) -> bool:
    """
    Check that a user exists, is active and holds one of ``roles``.

    Args:
        user: Resolved actor, or None if the id matched nobody
        *roles: Roles that may perform the operation

    Returns:
        True if the user may act
    """
    return user is not None and user.is_active and user.has_role(*roles)


def unauthorized_message(roles: tuple[UserRole, ...], action: str) -> str:
    """
    Build "Only active admins can create orders" style messages.

    More than one allowed role reads as "users".
    """
    who = roles[0].plural if len(roles) == 1 else "users"
    return f"Only active {who} can {action}"


class ActorAuthorizer:
    """Resolves actors through the users port and applies is_active_with_role."""

    def __init__(self, users_repository: UsersRepository):
        self.users_repository = users_repository

    async def require(
        self,
        actor_id: str,
        *roles: UserRole,
        action: str = "perform this action",
        error_cls: Optional[Type[UnauthorizedError]] = None,
    ) -> User:
        """
        Resolve the actor or fail.

        Args:
            actor_id: Id of the acting user
            *roles: Roles that may perform the operation
            action: Verb phrase for the default message ("create orders")
            error_cls: UnauthorizedError subclass to raise instead of the
                default; it is built with ``actor_id`` and ``required_roles``

        Returns:
            The active actor

        Raises:
            UnauthorizedError: If the actor is missing, inactive or has the wrong role
        """
        actor = await self.users_repository.find_by_id(actor_id)
        if is_active_with_role(actor, *roles):
            return actor

        required_roles = [role.value for role in roles]
        logger.debug("Actor rejected", extra={"actor_id": actor_id, "required_roles": required_roles})
        if error_cls is not None:
            raise error_cls(actor_id=actor_id, required_roles=required_roles)
        raise UnauthorizedError(
            unauthorized_message(roles, action),
            actor_id=actor_id,
            required_roles=required_roles,
        )
