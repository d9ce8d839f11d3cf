"""
Tests for the order lifecycle use cases: pick up, deliver, return, reset.
"""

import pytest
from pydantic import ValidationError

from domain.value_objects import OrderStatus
from dtos.request import (
    CreateOrderRequest,
    MarkOrderAsDeliveredRequest,
    MarkOrderAsPendingRequest,
    MarkOrderAsReturnedRequest,
    PickUpOrderRequest,
)
from exceptions import (
    DeliveryPhotoIsRequiredError,
    OnlyActiveDeliverymenCanMarkOrdersAsDeliveredError,
    OnlyAssignedDeliverymanCanMarkOrderAsDeliveredError,
    OnlyAssignedDeliverymanCanMarkOrderAsReturnedError,
    OrderMustBePendingToBePickedUpError,
    OrderMustBePickedUpToBeMarkedAsDeliveredError,
    OrderNotFoundError,
    UnauthorizedError,
)
from factories import address_fields, make_order

pytestmark = pytest.mark.asyncio


@pytest.fixture
def pending_order(repos):
    order = make_order(recipient_id="recipient-1")
    repos.orders.store.put(order)
    return order


@pytest.fixture
def picked_up_order(repos, deliveryman):
    order = make_order(recipient_id="recipient-1")
    order.pick_up(deliveryman.id)
    repos.orders.store.put(order)
    return order


async def test_full_delivery_scenario(use_cases, repos, admin, deliveryman, recipient):
    created = await use_cases.create_order.execute(
        CreateOrderRequest(admin_id="admin-1", recipient_id="recipient-1", **address_fields())
    )
    order = created.unwrap()
    assert order.status == OrderStatus.PENDING
    assert order.deliveryman_id is None
    assert order.street == "Rua das Flores"

    picked = await use_cases.pick_up_order.execute(
        PickUpOrderRequest(deliveryman_id="deliveryman-1", order_id=str(order.id))
    )
    assert picked.unwrap().status == OrderStatus.PICKED_UP
    assert picked.unwrap().is_assigned_to("deliveryman-1")

    delivered = await use_cases.mark_order_as_delivered.execute(
        MarkOrderAsDeliveredRequest(
            deliveryman_id="deliveryman-1",
            order_id=str(order.id),
            delivery_photo_ids=["p1", "p2"],
        )
    )

    assert delivered.is_success()
    stored = await repos.orders.find_by_id(str(order.id))
    assert stored.status == OrderStatus.DELIVERED
    assert len(stored.delivery_photos) == 2
    assert [a.attachment_id.value for a in stored.delivery_photos] == ["p1", "p2"]


async def test_other_deliveryman_cannot_deliver(use_cases, repos, picked_up_order, other_deliveryman):
    result = await use_cases.mark_order_as_delivered.execute(
        MarkOrderAsDeliveredRequest(
            deliveryman_id="deliveryman-2",
            order_id=str(picked_up_order.id),
            delivery_photo_ids=["p1"],
        )
    )

    assert result.is_failure()
    assert isinstance(result.error, OnlyAssignedDeliverymanCanMarkOrderAsDeliveredError)
    stored = await repos.orders.find_by_id(str(picked_up_order.id))
    assert stored.status == OrderStatus.PICKED_UP
    assert stored.is_assigned_to("deliveryman-1")


class TestPickUpOrder:
    async def test_pending_order_is_assigned_to_actor(self, use_cases, repos, pending_order, deliveryman):
        result = await use_cases.pick_up_order.execute(
            PickUpOrderRequest(deliveryman_id="deliveryman-1", order_id=str(pending_order.id))
        )

        order = result.unwrap()
        assert order.status == OrderStatus.PICKED_UP
        assert order.deliveryman_id == deliveryman.id

    async def test_non_pending_order_is_rejected(self, use_cases, picked_up_order, other_deliveryman):
        result = await use_cases.pick_up_order.execute(
            PickUpOrderRequest(deliveryman_id="deliveryman-2", order_id=str(picked_up_order.id))
        )

        assert isinstance(result.error, OrderMustBePendingToBePickedUpError)
        assert result.error.message == "Order must be pending to be picked up"

    async def test_inactive_deliveryman_leaves_order_unchanged(
        self, use_cases, repos, pending_order, inactive_deliveryman
    ):
        result = await use_cases.pick_up_order.execute(
            PickUpOrderRequest(deliveryman_id=str(inactive_deliveryman.id), order_id=str(pending_order.id))
        )

        assert isinstance(result.error, UnauthorizedError)
        assert result.error.message == "Only active deliverymen can pick up orders"
        stored = await repos.orders.find_by_id(str(pending_order.id))
        assert stored.status == OrderStatus.PENDING
        assert stored.deliveryman_id is None

    async def test_admin_cannot_pick_up(self, use_cases, pending_order, admin):
        result = await use_cases.pick_up_order.execute(
            PickUpOrderRequest(deliveryman_id="admin-1", order_id=str(pending_order.id))
        )

        assert isinstance(result.error, UnauthorizedError)

    async def test_missing_order(self, use_cases, deliveryman):
        result = await use_cases.pick_up_order.execute(
            PickUpOrderRequest(deliveryman_id="deliveryman-1", order_id="missing")
        )

        assert isinstance(result.error, OrderNotFoundError)
        assert result.error.message == "Order not found"


class TestMarkOrderAsDelivered:
    async def test_inactive_actor_checked_first(self, use_cases, inactive_deliveryman):
        result = await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(
                deliveryman_id=str(inactive_deliveryman.id),
                order_id="missing",
                delivery_photo_ids=[],
            )
        )

        assert isinstance(result.error, OnlyActiveDeliverymenCanMarkOrdersAsDeliveredError)

    async def test_missing_order_checked_before_assignment(self, use_cases, deliveryman):
        result = await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(deliveryman_id="deliveryman-1", order_id="missing")
        )

        assert isinstance(result.error, OrderNotFoundError)

    async def test_unassigned_pending_order_fails_assignment(self, use_cases, pending_order, deliveryman):
        result = await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(
                deliveryman_id="deliveryman-1",
                order_id=str(pending_order.id),
                delivery_photo_ids=["p1"],
            )
        )

        assert isinstance(result.error, OnlyAssignedDeliverymanCanMarkOrderAsDeliveredError)

    async def test_status_checked_before_photos(self, use_cases, repos, picked_up_order, admin):
        await use_cases.mark_order_as_returned.execute(
            MarkOrderAsReturnedRequest(user_id="admin-1", order_id=str(picked_up_order.id))
        )

        result = await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(deliveryman_id="deliveryman-1", order_id=str(picked_up_order.id))
        )

        assert isinstance(result.error, OrderMustBePickedUpToBeMarkedAsDeliveredError)

    async def test_empty_photo_list_fails(self, use_cases, repos, picked_up_order):
        result = await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(
                deliveryman_id="deliveryman-1",
                order_id=str(picked_up_order.id),
                delivery_photo_ids=[],
            )
        )

        assert isinstance(result.error, DeliveryPhotoIsRequiredError)
        stored = await repos.orders.find_by_id(str(picked_up_order.id))
        assert stored.status == OrderStatus.PICKED_UP
        assert stored.delivery_photos == []

    async def test_unwrap_raises_captured_error(self, use_cases, picked_up_order):
        result = await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(deliveryman_id="deliveryman-1", order_id=str(picked_up_order.id))
        )

        with pytest.raises(DeliveryPhotoIsRequiredError):
            result.unwrap()

    async def test_blank_photo_id_rejected_by_request(self, use_cases, repos, picked_up_order):
        with pytest.raises(ValidationError, match="delivery_photo_ids"):
            MarkOrderAsDeliveredRequest(
                deliveryman_id="deliveryman-1",
                order_id=str(picked_up_order.id),
                delivery_photo_ids=["p1", ""],
            )

        stored = await repos.orders.find_by_id(str(picked_up_order.id))
        assert stored.status == OrderStatus.PICKED_UP


class TestMarkOrderAsReturned:
    async def test_admin_can_return_any_order(self, use_cases, pending_order, admin):
        result = await use_cases.mark_order_as_returned.execute(
            MarkOrderAsReturnedRequest(user_id="admin-1", order_id=str(pending_order.id))
        )

        assert result.unwrap().status == OrderStatus.RETURNED

    async def test_assigned_deliveryman_can_return(self, use_cases, picked_up_order):
        result = await use_cases.mark_order_as_returned.execute(
            MarkOrderAsReturnedRequest(user_id="deliveryman-1", order_id=str(picked_up_order.id))
        )

        order = result.unwrap()
        assert order.status == OrderStatus.RETURNED
        assert order.is_assigned_to("deliveryman-1")

    async def test_other_deliveryman_cannot_return(self, use_cases, repos, picked_up_order, other_deliveryman):
        result = await use_cases.mark_order_as_returned.execute(
            MarkOrderAsReturnedRequest(user_id="deliveryman-2", order_id=str(picked_up_order.id))
        )

        assert isinstance(result.error, OnlyAssignedDeliverymanCanMarkOrderAsReturnedError)
        stored = await repos.orders.find_by_id(str(picked_up_order.id))
        assert stored.status == OrderStatus.PICKED_UP

    async def test_inactive_user_cannot_return(self, use_cases, pending_order, inactive_admin):
        result = await use_cases.mark_order_as_returned.execute(
            MarkOrderAsReturnedRequest(user_id=str(inactive_admin.id), order_id=str(pending_order.id))
        )

        assert isinstance(result.error, UnauthorizedError)
        assert result.error.message == "Only active users can mark orders as returned"


class TestMarkOrderAsPending:
    async def test_admin_resets_delivered_order(self, use_cases, repos, picked_up_order, admin):
        await use_cases.mark_order_as_delivered.execute(
            MarkOrderAsDeliveredRequest(
                deliveryman_id="deliveryman-1",
                order_id=str(picked_up_order.id),
                delivery_photo_ids=["p1"],
            )
        )

        result = await use_cases.mark_order_as_pending.execute(
            MarkOrderAsPendingRequest(admin_id="admin-1", order_id=str(picked_up_order.id))
        )

        order = result.unwrap()
        assert order.status == OrderStatus.PENDING
        assert order.deliveryman_id is None
        assert order.delivery_photos == []

    async def test_deliveryman_cannot_reset(self, use_cases, picked_up_order):
        result = await use_cases.mark_order_as_pending.execute(
            MarkOrderAsPendingRequest(admin_id="deliveryman-1", order_id=str(picked_up_order.id))
        )

        assert isinstance(result.error, UnauthorizedError)
        assert result.error.message == "Only active admins can mark orders as pending"

    async def test_missing_order(self, use_cases, admin):
        result = await use_cases.mark_order_as_pending.execute(
            MarkOrderAsPendingRequest(admin_id="admin-1", order_id="missing")
        )

        assert isinstance(result.error, OrderNotFoundError)
