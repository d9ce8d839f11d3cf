"""
Order lifecycle use cases

Moves orders through the status machine in domain/value_objects/order_status.py:

    pending --pick up--> picked_up --deliver--> delivered
       ^                    |                      |
       |                    +------return----------+--> returned
       +---- admin reset (from any status) --------------+

Each use case authorizes the actor, loads the order, lets the Order entity
validate and apply the transition, then saves it.
"""

from domain.entities import Order
from domain.value_objects import UserRole
from dtos.request import (
    MarkOrderAsDeliveredRequest,
    MarkOrderAsPendingRequest,
    MarkOrderAsReturnedRequest,
    PickUpOrderRequest,
)
from exceptions import (
    OnlyActiveDeliverymenCanMarkOrdersAsDeliveredError,
    OnlyAssignedDeliverymanCanMarkOrderAsDeliveredError,
    OnlyAssignedDeliverymanCanMarkOrderAsReturnedError,
    OrderNotFoundError,
)
from repositories.interfaces import OrdersRepository, UsersRepository
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import StructuredLogger
from .authorization import ActorAuthorizer

logger = StructuredLogger(__name__)


class _OrderTransitionUseCase:
    def __init__(self, orders_repository: OrdersRepository, users_repository: UsersRepository):
        self.orders_repository = orders_repository
        self.authorizer = ActorAuthorizer(users_repository)

    async def _load(self, order_id: str) -> Order:
        order = await self.orders_repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def _save(self, order: Order, previous_status) -> Order:
        saved = await self.orders_repository.save(order)
        logger.info(
            f"Order moved from {previous_status.value} to {saved.status.value}",
            extra={"order_id": str(saved.id)},
        )
        return saved


class PickUpOrderUseCase(_OrderTransitionUseCase):
    """An active deliveryman takes a pending order."""

    @handle_use_case_errors("Pick up order")
    async def execute(self, request: PickUpOrderRequest) -> Order:
        deliveryman = await self.authorizer.require(
            request.deliveryman_id, UserRole.DELIVERYMAN, action="pick up orders"
        )
        order = await self._load(request.order_id)

        previous = order.status
        order.pick_up(deliveryman.id)
        return await self._save(order, previous)


class MarkOrderAsDeliveredUseCase(_OrderTransitionUseCase):
    """
    The assigned deliveryman confirms delivery with proof photos.

    Checks run in a fixed order and stop at the first failure: actor, order
    existence, assignment, status, photos.
    """

    @handle_use_case_errors("Mark order as delivered")
    async def execute(self, request: MarkOrderAsDeliveredRequest) -> Order:
        await self.authorizer.require(
            request.deliveryman_id,
            UserRole.DELIVERYMAN,
            error_cls=OnlyActiveDeliverymenCanMarkOrdersAsDeliveredError,
        )
        order = await self._load(request.order_id)

        if not order.is_assigned_to(request.deliveryman_id):
            raise OnlyAssignedDeliverymanCanMarkOrderAsDeliveredError(actor_id=request.deliveryman_id)

        previous = order.status
        attachments = order.mark_delivered(request.delivery_photo_ids)
        logger.debug(f"Attached {len(attachments)} delivery photos", extra={"order_id": str(order.id)})
        return await self._save(order, previous)


class MarkOrderAsReturnedUseCase(_OrderTransitionUseCase):
    """An admin, or the deliveryman holding the order, sends it back."""

    @handle_use_case_errors("Mark order as returned")
    async def execute(self, request: MarkOrderAsReturnedRequest) -> Order:
        actor = await self.authorizer.require(
            request.user_id,
            UserRole.ADMIN,
            UserRole.DELIVERYMAN,
            action="mark orders as returned",
        )
        order = await self._load(request.order_id)

        if actor.role == UserRole.DELIVERYMAN and not order.is_assigned_to(actor.id):
            raise OnlyAssignedDeliverymanCanMarkOrderAsReturnedError(actor_id=request.user_id)

        previous = order.status
        order.mark_returned()
        return await self._save(order, previous)


class MarkOrderAsPendingUseCase(_OrderTransitionUseCase):
    """Admin override putting any order back to pending."""

    @handle_use_case_errors("Mark order as pending")
    async def execute(self, request: MarkOrderAsPendingRequest) -> Order:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="mark orders as pending")
        order = await self._load(request.order_id)

        previous = order.status
        order.reset_to_pending()
        return await self._save(order, previous)
