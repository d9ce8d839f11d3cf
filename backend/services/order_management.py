"""
Order management use cases

Admin CRUD over orders, plus the two deliveryman listings.
"""

from typing import List, Optional

from domain.entities import Order
from domain.value_objects import UserRole
from dtos.request import (
    CreateOrderRequest,
    DeleteOrderRequest,
    ListNearbyOrdersRequest,
    ListOrdersRequest,
    ListUserDeliveriesRequest,
    UpdateOrderRequest,
)
from exceptions import OrderNotFoundError, RecipientNotFoundError
from repositories.interfaces import OrdersRepository, RecipientsRepository, UsersRepository
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import StructuredLogger
from .authorization import ActorAuthorizer

logger = StructuredLogger(__name__)


async def _load_order(orders_repository: OrdersRepository, order_id: str) -> Order:
    order = await orders_repository.find_by_id(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


async def _ensure_recipient(recipients_repository: Optional[RecipientsRepository], recipient_id: str) -> None:
    # Without a recipients port the id is taken as given
    if recipients_repository is None:
        return
    if await recipients_repository.find_by_id(recipient_id) is None:
        raise RecipientNotFoundError(recipient_id)


class CreateOrderUseCase:
    """Admin registers a new order; it starts pending and unassigned."""

    def __init__(
        self,
        orders_repository: OrdersRepository,
        users_repository: UsersRepository,
        recipients_repository: Optional[RecipientsRepository] = None,
    ):
        self.orders_repository = orders_repository
        self.recipients_repository = recipients_repository
        self.authorizer = ActorAuthorizer(users_repository)

    @handle_use_case_errors("Create order")
    async def execute(self, request: CreateOrderRequest) -> Order:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="create orders")
        await _ensure_recipient(self.recipients_repository, request.recipient_id)

        order = Order(
            recipient_id=request.recipient_id,
            street=request.street,
            number=request.number,
            neighborhood=request.neighborhood,
            city=request.city,
            state=request.state,
            zip_code=request.zip_code,
        )
        await self.orders_repository.create(order)

        logger.info("Order created", extra={"order_id": str(order.id)})
        return order


class UpdateOrderUseCase:
    def __init__(
        self,
        orders_repository: OrdersRepository,
        users_repository: UsersRepository,
        recipients_repository: Optional[RecipientsRepository] = None,
    ):
        self.orders_repository = orders_repository
        self.recipients_repository = recipients_repository
        self.authorizer = ActorAuthorizer(users_repository)

    @handle_use_case_errors("Update order")
    async def execute(self, request: UpdateOrderRequest) -> Order:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="update orders")
        order = await _load_order(self.orders_repository, request.order_id)

        changes = request.changes()
        if changes.get("recipient_id") is not None:
            await _ensure_recipient(self.recipients_repository, changes["recipient_id"])

        changed = order.update(**changes)
        order = await self.orders_repository.save(order)

        logger.info("Order updated", extra={"fields": ",".join(sorted(changed))})
        return order


class DeleteOrderUseCase:
    def __init__(self, orders_repository: OrdersRepository, users_repository: UsersRepository):
        self.orders_repository = orders_repository
        self.authorizer = ActorAuthorizer(users_repository)

    @handle_use_case_errors("Delete order")
    async def execute(self, request: DeleteOrderRequest) -> None:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="delete orders")
        order = await _load_order(self.orders_repository, request.order_id)
        await self.orders_repository.delete(order)
        logger.info("Order deleted")


class ListOrdersUseCase:
    """Every order, whatever its status."""

    def __init__(self, orders_repository: OrdersRepository, users_repository: UsersRepository):
        self.orders_repository = orders_repository
        self.authorizer = ActorAuthorizer(users_repository)

    @handle_use_case_errors("List orders")
    async def execute(self, request: ListOrdersRequest) -> List[Order]:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="list orders")
        return await self.orders_repository.find_all()


class ListNearbyOrdersUseCase:
    def __init__(self, orders_repository: OrdersRepository, users_repository: UsersRepository):
        self.orders_repository = orders_repository
        self.authorizer = ActorAuthorizer(users_repository)

    @handle_use_case_errors("List nearby orders")
    async def execute(self, request: ListNearbyOrdersRequest) -> List[Order]:
        await self.authorizer.require(
            request.deliveryman_id, UserRole.DELIVERYMAN, action="list nearby orders"
        )
        return await self.orders_repository.find_nearby(request.neighborhood)


class ListUserDeliveriesUseCase:
    """Orders currently assigned to the acting deliveryman."""

    def __init__(self, orders_repository: OrdersRepository, users_repository: UsersRepository):
        self.orders_repository = orders_repository
        self.authorizer = ActorAuthorizer(users_repository)

    @handle_use_case_errors("List user deliveries")
    async def execute(self, request: ListUserDeliveriesRequest) -> List[Order]:
        await self.authorizer.require(
            request.deliveryman_id, UserRole.DELIVERYMAN, action="list their deliveries"
        )
        return await self.orders_repository.find_by_deliveryman_id(request.deliveryman_id)
