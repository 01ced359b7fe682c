"""Tests for the order status state machine and the authorization gate."""

import uuid

import pytest

from app.auth import Caller
from app.errors import ForbiddenError, ValidationError
from app.models import Order
from app.services import order_lifecycle
from app.services.ownership import assert_ownership, assert_role


def order(status: str) -> Order:
    return Order(id=uuid.uuid4(), status=status)


class TestTransitions:
    def test_ship_stamps_shipped_at(self):
        o = order_lifecycle.transition(order("pending"), "shipped")
        assert o.status == "shipped"
        assert o.shipped_at is not None
        assert o.delivered_at is None

    def test_deliver_stamps_delivered_at(self):
        o = order_lifecycle.transition(order("shipped"), "delivered")
        assert o.status == "delivered"
        assert o.delivered_at is not None

    def test_cancel_pending(self):
        assert order_lifecycle.transition(order("pending"), "cancelled").status == "cancelled"

    @pytest.mark.parametrize(
        "current,target",
        [
            ("pending", "delivered"),
            ("pending", "pending"),
            ("shipped", "cancelled"),
            ("shipped", "pending"),
            ("delivered", "cancelled"),
            ("cancelled", "pending"),
        ],
    )
    def test_invalid_transitions(self, current, target):
        o = order(current)
        with pytest.raises(ValidationError, match="invalid status transition"):
            order_lifecycle.transition(o, target)
        assert o.status == current

    def test_terminal_statuses(self):
        assert order_lifecycle.TERMINAL_STATUSES == {"delivered", "cancelled"}

    @pytest.mark.parametrize("status", ["delivered", "cancelled"])
    def test_terminal_orders_not_deletable(self, status):
        with pytest.raises(ValidationError):
            order_lifecycle.ensure_deletable(order(status))

    def test_only_pending_editable(self):
        order_lifecycle.ensure_editable(order("pending"))
        with pytest.raises(ValidationError):
            order_lifecycle.ensure_editable(order("shipped"))


class TestAuthorizationGate:
    def test_owner_passes(self):
        uid = uuid.uuid4()
        assert_ownership(uid, Caller(id=uid, role="store"))

    def test_admin_passes(self):
        assert_ownership(uuid.uuid4(), Caller(id=uuid.uuid4(), role="admin"))

    def test_stranger_denied(self):
        with pytest.raises(ForbiddenError):
            assert_ownership(uuid.uuid4(), Caller(id=uuid.uuid4(), role="store"))

    def test_missing_owner_denied(self):
        with pytest.raises(ForbiddenError):
            assert_ownership(None, Caller(id=uuid.uuid4(), role="supplier"))

    def test_role_check(self):
        assert_role(Caller(id=uuid.uuid4(), role="supplier"), "supplier")
        assert_role(Caller(id=uuid.uuid4(), role="admin"), "supplier")
        with pytest.raises(ForbiddenError):
            assert_role(Caller(id=uuid.uuid4(), role="store"), "supplier")

    def test_admin_only(self):
        with pytest.raises(ForbiddenError):
            assert_role(Caller(id=uuid.uuid4(), role="user"))
