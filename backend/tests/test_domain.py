"""
Tests for domain value objects and entities.
"""

import pytest

from constants import NotificationType
from domain.entities import Notification, OrderAttachment
from domain.value_objects import OrderStatus, UniqueEntityID, UserRole, UserStatus
from exceptions import (
    DeliveryPhotoIsRequiredError,
    OrderMustBePendingToBePickedUpError,
    OrderMustBePickedUpToBeMarkedAsDeliveredError,
)
from factories import make_admin, make_deliveryman, make_order, make_recipient


class TestOrderStatus:
    def test_regular_transitions(self):
        assert OrderStatus.PENDING.can_transition_to(OrderStatus.PICKED_UP)
        assert OrderStatus.PICKED_UP.can_transition_to(OrderStatus.DELIVERED)
        assert not OrderStatus.PENDING.can_transition_to(OrderStatus.DELIVERED)
        assert not OrderStatus.DELIVERED.can_transition_to(OrderStatus.PICKED_UP)

    def test_returned_reachable_from_every_status(self):
        for status in OrderStatus:
            assert status.can_transition_to(OrderStatus.RETURNED)

    def test_pending_is_not_a_regular_target(self):
        for status in OrderStatus:
            assert not status.can_transition_to(OrderStatus.PENDING)

    def test_from_string(self):
        assert OrderStatus.from_string("picked_up") is OrderStatus.PICKED_UP
        with pytest.raises(ValueError, match="Invalid order status: lost"):
            OrderStatus.from_string("lost")


class TestUniqueEntityID:
    def test_generated_ids_are_unique(self):
        assert UniqueEntityID() != UniqueEntityID()

    def test_equality_by_value(self):
        assert UniqueEntityID("abc") == UniqueEntityID("abc")
        assert UniqueEntityID("abc").equals("abc")
        assert not UniqueEntityID("abc").equals(None)
        assert str(UniqueEntityID("abc")) == "abc"

    def test_of_coerces(self):
        assert UniqueEntityID.of(None) is None
        existing = UniqueEntityID("x")
        assert UniqueEntityID.of(existing) is existing
        assert UniqueEntityID.of("x") == existing

    def test_empty_value_rejected(self):
        with pytest.raises(ValueError):
            UniqueEntityID("")


def test_role_plural_labels():
    assert UserRole.ADMIN.plural == "admins"
    assert UserRole.DELIVERYMAN.plural == "deliverymen"


class TestOrder:
    def test_new_order_is_pending_and_unassigned(self):
        order = make_order()

        assert order.status == OrderStatus.PENDING
        assert order.deliveryman_id is None
        assert order.delivery_photos == []
        assert order.updated_at == order.created_at

    def test_pick_up_assigns_deliveryman(self):
        order = make_order()

        order.pick_up("deliveryman-1")

        assert order.status == OrderStatus.PICKED_UP
        assert order.is_assigned_to("deliveryman-1")
        assert order.updated_at >= order.created_at

    def test_pick_up_requires_pending(self):
        order = make_order()
        order.pick_up("deliveryman-1")

        with pytest.raises(OrderMustBePendingToBePickedUpError):
            order.pick_up("deliveryman-2")
        assert order.is_assigned_to("deliveryman-1")

    def test_mark_delivered_creates_attachments(self):
        order = make_order()
        order.pick_up("deliveryman-1")

        attachments = order.mark_delivered(["p1", "p2"])

        assert order.status == OrderStatus.DELIVERED
        assert [str(a.attachment_id) for a in attachments] == ["p1", "p2"]
        assert all(a.order_id == order.id for a in attachments)
        assert order.delivery_photos == attachments

    def test_mark_delivered_checks_status_before_photos(self):
        order = make_order()

        with pytest.raises(OrderMustBePickedUpToBeMarkedAsDeliveredError):
            order.mark_delivered([])

    def test_mark_delivered_requires_photo(self):
        order = make_order()
        order.pick_up("deliveryman-1")

        with pytest.raises(DeliveryPhotoIsRequiredError):
            order.mark_delivered([])
        assert order.status == OrderStatus.PICKED_UP

    def test_mark_returned_keeps_deliveryman(self):
        order = make_order()
        order.pick_up("deliveryman-1")

        order.mark_returned()

        assert order.status == OrderStatus.RETURNED
        assert order.is_assigned_to("deliveryman-1")

    def test_reset_to_pending_clears_assignment_and_photos(self):
        order = make_order()
        order.pick_up("deliveryman-1")
        order.mark_delivered(["p1"])

        order.reset_to_pending()

        assert order.status == OrderStatus.PENDING
        assert order.deliveryman_id is None
        assert order.delivery_photos == []

    def test_update_applies_only_given_fields(self):
        order = make_order()

        changed = order.update(street="Rua Nova", recipient_id="recipient-2")

        assert sorted(changed) == ["recipient_id", "street"]
        assert order.street == "Rua Nova"
        assert order.recipient_id == UniqueEntityID("recipient-2")
        assert order.city == "Curitiba"

    def test_update_rejects_status(self):
        order = make_order()

        with pytest.raises(ValueError, match="status"):
            order.update(status=OrderStatus.DELIVERED)


class TestUserAndRecipient:
    def test_user_roles_and_status(self):
        admin = make_admin()
        deliveryman = make_deliveryman()

        assert admin.has_role(UserRole.ADMIN)
        assert not deliveryman.has_role(UserRole.ADMIN)
        assert deliveryman.has_role(UserRole.ADMIN, UserRole.DELIVERYMAN)
        assert deliveryman.is_active

    def test_deactivate_and_activate(self):
        user = make_deliveryman()

        user.set_status(UserStatus.INACTIVE)
        assert user.status == UserStatus.INACTIVE
        assert not user.is_active

        user.set_status(UserStatus.ACTIVE)
        assert user.is_active

    def test_user_update_is_limited_to_profile_fields(self):
        user = make_deliveryman()

        user.update(name="João", phone="41988887777")
        assert user.name == "João"

        with pytest.raises(ValueError):
            user.update(role=UserRole.ADMIN)

    def test_recipient_update(self):
        recipient = make_recipient()

        recipient.update(latitude=-25.43, longitude=-49.27)

        assert recipient.latitude == -25.43
        assert recipient.name == "Maria Souza"
        assert recipient.updated_at >= recipient.created_at


def test_notification_for_status():
    notification = Notification.for_status("order-1", OrderStatus.DELIVERED)

    assert notification.message == "Order status updated to delivered"
    assert notification.type == NotificationType.EMAIL
    assert notification.order_id == UniqueEntityID("order-1")


def test_attachments_for_photos_keep_order():
    attachments = OrderAttachment.for_photos(UniqueEntityID("o-1"), ["b", "a"])

    assert [a.attachment_id.value for a in attachments] == ["b", "a"]
    assert attachments[0].id != attachments[1].id
