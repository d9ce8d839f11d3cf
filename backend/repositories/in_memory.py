"""
In-memory adapters for the repository ports.

Entities are copied on the way in and on the way out, so a caller mutating an
entity it loaded changes nothing until it calls ``save``. Used by the tests and
by the default wiring in dependencies.py.
"""

from copy import deepcopy
from typing import Dict, Generic, List, Optional, TypeVar

from domain.entities import Notification, Order, Recipient, User
from domain.value_objects import UserStatus
from exceptions import UserNotFoundError
from .interfaces import (
    NotificationsRepository,
    OrdersRepository,
    RecipientsRepository,
    UsersRepository,
)
from .order_specifications import (
    OrdersByDeliverymanSpec,
    OrdersInNeighborhoodSpec,
    UsersByCpfSpec,
    deliverymen_spec,
)
from .specifications import Specification

E = TypeVar('E')


class InMemoryStore(Generic[E]):
    """Insertion-ordered entity map keyed by the id string."""

    def __init__(self):
        self.items: Dict[str, E] = {}

    def get(self, id) -> Optional[E]:
        item = self.items.get(str(id))
        return deepcopy(item) if item is not None else None

    def put(self, entity: E) -> E:
        self.items[str(entity.id)] = deepcopy(entity)
        return deepcopy(entity)

    def pop(self, id) -> None:
        self.items.pop(str(id), None)

    def all(self) -> List[E]:
        return [deepcopy(item) for item in self.items.values()]

    def find(self, spec: Specification[E]) -> List[E]:
        return [deepcopy(item) for item in self.items.values() if spec.is_satisfied_by(item)]

    def first(self, spec: Specification[E]) -> Optional[E]:
        for item in self.items.values():
            if spec.is_satisfied_by(item):
                return deepcopy(item)
        return None


class InMemoryUsersRepository(UsersRepository):
    def __init__(self):
        self.store: InMemoryStore[User] = InMemoryStore()

    async def find_by_cpf(self, cpf: str) -> Optional[User]:
        return self.store.first(UsersByCpfSpec(cpf))

    async def find_by_id(self, id: str) -> Optional[User]:
        return self.store.get(id)

    async def create(self, user: User) -> None:
        self.store.put(user)

    async def save(self, user: User) -> User:
        return self.store.put(user)

    async def patch(self, id: str, status: UserStatus) -> User:
        user = self.store.get(id)
        if user is None:
            raise UserNotFoundError(str(id))
        user.set_status(status)
        return self.store.put(user)

    async def find_all_deliverymen(self) -> List[User]:
        return self.store.find(deliverymen_spec())


class InMemoryOrdersRepository(OrdersRepository):
    def __init__(self):
        self.store: InMemoryStore[Order] = InMemoryStore()

    async def create(self, order: Order) -> None:
        self.store.put(order)

    async def find_by_id(self, id: str) -> Optional[Order]:
        return self.store.get(id)

    async def save(self, order: Order) -> Order:
        return self.store.put(order)

    async def delete(self, order: Order) -> None:
        self.store.pop(order.id)

    async def find_all(self) -> List[Order]:
        return self.store.all()

    async def find_nearby(self, neighborhood: str) -> List[Order]:
        return self.store.find(OrdersInNeighborhoodSpec(neighborhood))

    async def find_by_deliveryman_id(self, id: str) -> List[Order]:
        return self.store.find(OrdersByDeliverymanSpec(id))


class InMemoryRecipientsRepository(RecipientsRepository):
    def __init__(self):
        self.store: InMemoryStore[Recipient] = InMemoryStore()

    async def create(self, recipient: Recipient) -> None:
        self.store.put(recipient)

    async def find_by_id(self, id: str) -> Optional[Recipient]:
        return self.store.get(id)

    async def save(self, recipient: Recipient) -> Recipient:
        return self.store.put(recipient)

    async def delete(self, recipient: Recipient) -> None:
        self.store.pop(recipient.id)

    async def find_all(self) -> List[Recipient]:
        return self.store.all()


class InMemoryNotificationsRepository(NotificationsRepository):
    def __init__(self):
        self.store: InMemoryStore[Notification] = InMemoryStore()

    async def create(self, notification: Notification) -> None:
        self.store.put(notification)

    async def find_by_order_id(self, order_id: str) -> List[Notification]:
        return [n for n in self.store.all() if n.order_id.equals(order_id)]
