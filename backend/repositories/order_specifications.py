"""
Order and user specifications

Concrete criteria behind the listing operations of the repository ports.
"""

from sqlalchemy import func

from domain.entities import Order, User
from domain.value_objects import UserRole, UserStatus
from models import Order as OrderModel
from models import User as UserModel
from .specifications import Specification


class OrdersInNeighborhoodSpec(Specification[Order]):
    """Orders addressed to a neighborhood, ignoring case and outer spaces."""

    def __init__(self, neighborhood: str):
        """
        Initialize specification.

        Args:
            neighborhood: Neighborhood name as typed by the deliveryman
        """
        self.neighborhood = neighborhood.strip().lower()

    def is_satisfied_by(self, order: Order) -> bool:
        return order.neighborhood.strip().lower() == self.neighborhood

    def to_sql_filter(self):
        return func.lower(func.trim(OrderModel.neighborhood)) == self.neighborhood


class OrdersByDeliverymanSpec(Specification[Order]):
    """Orders currently assigned to a deliveryman."""

    def __init__(self, deliveryman_id: str):
        self.deliveryman_id = str(deliveryman_id)

    def is_satisfied_by(self, order: Order) -> bool:
        return order.is_assigned_to(self.deliveryman_id)

    def to_sql_filter(self):
        return OrderModel.deliveryman_id == self.deliveryman_id


class UsersByRoleSpec(Specification[User]):
    """Users holding a role."""

    def __init__(self, role: UserRole):
        self.role = UserRole(role)

    def is_satisfied_by(self, user: User) -> bool:
        return user.role == self.role

    def to_sql_filter(self):
        return UserModel.role == self.role.value


class ActiveUsersSpec(Specification[User]):
    """Users whose account is active."""

    def is_satisfied_by(self, user: User) -> bool:
        return user.status == UserStatus.ACTIVE

    def to_sql_filter(self):
        return UserModel.status == UserStatus.ACTIVE.value


def deliverymen_spec() -> Specification[User]:
    """Every deliveryman, active or not."""
    return UsersByRoleSpec(UserRole.DELIVERYMAN)


class UsersByCpfSpec(Specification[User]):
    """The user logging in with a cpf."""

    def __init__(self, cpf: str):
        self.cpf = cpf

    def is_satisfied_by(self, user: User) -> bool:
        return user.cpf == self.cpf

    def to_sql_filter(self):
        return UserModel.cpf == self.cpf
