"""
Recipient notification use case

Records that the recipient of an order was told about a status change. The
caller decides when to invoke it; nothing here retries or queues.
"""

from domain.entities import Notification
from dtos.request import NotifyRecipientRequest
from exceptions import OrderNotFoundError
from repositories.interfaces import NotificationsRepository, OrdersRepository
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import StructuredLogger

logger = StructuredLogger(__name__)


class NotifyRecipientUseCase:
    def __init__(self, orders_repository: OrdersRepository, notifications_repository: NotificationsRepository):
        self.orders_repository = orders_repository
        self.notifications_repository = notifications_repository

    @handle_use_case_errors("Notify recipient")
    async def execute(self, request: NotifyRecipientRequest) -> Notification:
        order = await self.orders_repository.find_by_id(request.order_id)
        if order is None:
            raise OrderNotFoundError(request.order_id)

        notification = Notification.for_status(order.id, request.status)
        await self.notifications_repository.create(notification)

        logger.info(notification.message, extra={"notification_type": notification.type.value})
        return notification
