"""Decimal helpers for monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal(100)


def to_money(value: Decimal | int | str) -> Decimal:
    """Round to cents, half-up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def percentage_of(value: Decimal, percentage: Decimal | int) -> Decimal:
    return to_money(Decimal(value) * Decimal(percentage) / HUNDRED)
