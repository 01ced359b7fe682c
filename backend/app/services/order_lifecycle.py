"""Order status state machine.

    pending ──> shipped ──> delivered
       │
       └──> cancelled

``delivered`` and ``cancelled`` are terminal.
"""

import logging
from datetime import datetime

from app.database import utcnow
from app.errors import ValidationError
from app.models import Order
from app.models.enums import OrderStatus

logger = logging.getLogger(__name__)

INITIAL_STATUS = OrderStatus.PENDING.value

ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    OrderStatus.PENDING.value: frozenset({OrderStatus.SHIPPED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.SHIPPED.value: frozenset({OrderStatus.DELIVERED.value}),
    OrderStatus.DELIVERED.value: frozenset(),
    OrderStatus.CANCELLED.value: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def transition(order: Order, target: str, now: datetime | None = None) -> Order:
    """Move *order* to *target*, stamping ship/delivery times."""
    if not can_transition(order.status, target):
        raise ValidationError("invalid status transition")
    now = now or utcnow()
    if target == OrderStatus.SHIPPED.value:
        order.shipped_at = now
    elif target == OrderStatus.DELIVERED.value:
        order.delivered_at = now
    logger.info("Order %s: %s -> %s", order.id, order.status, target)
    order.status = target
    return order


def ensure_editable(order: Order) -> None:
    if order.status != OrderStatus.PENDING.value:
        raise ValidationError("Only pending orders can be edited")


def ensure_deletable(order: Order) -> None:
    if order.status in TERMINAL_STATUSES:
        raise ValidationError(f"A {order.status} order cannot be deleted")
