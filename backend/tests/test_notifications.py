"""
Tests for the recipient notification use case.
"""

import pytest
from pydantic import ValidationError

from constants import NotificationType
from domain.value_objects import OrderStatus
from dtos.request import NotifyRecipientRequest
from exceptions import OrderNotFoundError
from factories import make_order

pytestmark = pytest.mark.asyncio


async def test_notification_is_recorded(use_cases, repos):
    order = make_order()
    repos.orders.store.put(order)

    result = await use_cases.notify_recipient.execute(
        NotifyRecipientRequest(order_id=str(order.id), status="picked_up")
    )

    notification = result.unwrap()
    assert notification.message == "Order status updated to picked_up"
    assert notification.type == NotificationType.EMAIL
    assert notification.order_id == order.id
    assert await repos.notifications.find_by_order_id(str(order.id)) == [notification]


async def test_each_call_appends(use_cases, repos):
    order = make_order()
    repos.orders.store.put(order)

    for status in (OrderStatus.PICKED_UP, OrderStatus.DELIVERED):
        await use_cases.notify_recipient.execute(NotifyRecipientRequest(order_id=str(order.id), status=status))

    messages = [n.message for n in await repos.notifications.find_by_order_id(str(order.id))]
    assert messages == ["Order status updated to picked_up", "Order status updated to delivered"]


async def test_missing_order(use_cases, repos):
    result = await use_cases.notify_recipient.execute(
        NotifyRecipientRequest(order_id="missing", status=OrderStatus.RETURNED)
    )

    assert isinstance(result.error, OrderNotFoundError)
    assert await repos.notifications.find_by_order_id("missing") == []


async def test_unknown_status_rejected_by_request():
    with pytest.raises(ValidationError):
        NotifyRecipientRequest(order_id="o-1", status="lost")
