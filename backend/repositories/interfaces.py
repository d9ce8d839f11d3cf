"""
Repository Interfaces

Abstract persistence ports consumed by the use cases. Adapters live beside
this module (in_memory.py, sqlalchemy_repositories.py); use cases only ever
see these classes.

Every method is a coroutine so an adapter backed by real I/O can be swapped in
without touching the callers. Lookups return None for a missing id; only
``UsersRepository.patch`` raises, because it has nothing to return.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities import Notification, Order, Recipient, User
from domain.value_objects import UserStatus


class UsersRepository(ABC):
    """
    Port for admins and deliverymen.
    """

    @abstractmethod
    async def find_by_cpf(self, cpf: str) -> Optional[User]:
        """
        Look a user up by the natural login key.

        Args:
            cpf: 11-digit cpf

        Returns:
            User or None if no user has this cpf
        """
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[User]:
        """
        Look a user up by id.

        Returns:
            User or None if not found
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> None:
        """Persist a new user."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist the current state of an existing user.

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def patch(self, id: str, status: UserStatus) -> User:
        """
        Change only the status of a user.

        Returns:
            The user after the change

        Raises:
            UserNotFoundError: If no user has this id
        """
        pass

    @abstractmethod
    async def find_all_deliverymen(self) -> List[User]:
        """Every user with the deliveryman role, active or not."""
        pass


class OrdersRepository(ABC):
    """
    Port for orders and their delivery photos.
    """

    @abstractmethod
    async def create(self, order: Order) -> None:
        """Persist a new order."""
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Order]:
        """
        Look an order up by id.

        Returns:
            Order (with its delivery photos) or None if not found
        """
        pass

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """
        Persist the current state of an existing order, photos included.

        Returns:
            The saved order
        """
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        """Remove an order and its attachments."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """Every order regardless of status."""
        pass

    @abstractmethod
    async def find_nearby(self, neighborhood: str) -> List[Order]:
        """
        Orders whose delivery address is in ``neighborhood``.

        Args:
            neighborhood: Neighborhood name, matched case-insensitively
        """
        pass

    @abstractmethod
    async def find_by_deliveryman_id(self, id: str) -> List[Order]:
        """Orders currently assigned to the given deliveryman."""
        pass


class RecipientsRepository(ABC):
    """
    Port for recipients.
    """

    @abstractmethod
    async def create(self, recipient: Recipient) -> None:
        """Persist a new recipient."""
        pass

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[Recipient]:
        """
        Look a recipient up by id.

        Returns:
            Recipient or None if not found
        """
        pass

    @abstractmethod
    async def save(self, recipient: Recipient) -> Recipient:
        """Persist the current state of an existing recipient."""
        pass

    @abstractmethod
    async def delete(self, recipient: Recipient) -> None:
        """Remove a recipient."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Recipient]:
        """Every recipient."""
        pass


class NotificationsRepository(ABC):
    """
    Port for the notification log. Notifications are append-only.
    """

    @abstractmethod
    async def create(self, notification: Notification) -> None:
        """Persist a notification."""
        pass

    @abstractmethod
    async def find_by_order_id(self, order_id: str) -> List[Notification]:
        """
        Notifications sent for an order, oldest first.

        Args:
            order_id: Order the notifications refer to
        """
        pass
