"""Order pricing.

Pure computation: the caller loads products, the commercial condition
and the applicable campaign, and the engine turns requested lines into
priced lines and order totals. Totals never come from the client.

Flow::

    lines = engine.price_lines(items, products, condition)
    value, quantity = engine.candidate(lines)
    campaign = <best eligible campaign for (supplier, value, quantity)>
    priced = engine.finalize(lines, campaign, condition)
"""

import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal

from app.errors import ValidationError
from app.models import CommercialCondition, Product, PromotionalCampaign
from app.services.campaigns import apply_discount, is_eligible
from app.services.money import ZERO, percentage_of, to_money


@dataclass(frozen=True, slots=True)
class LineRequest:
    """One requested order line, as sent by the client."""

    product_id: uuid.UUID
    quantity: int
    unit_price: Decimal | None = None


@dataclass(frozen=True, slots=True)
class PricedLine:
    product_id: uuid.UUID
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass(frozen=True, slots=True)
class PricedOrder:
    lines: tuple[PricedLine, ...]
    subtotal_value: Decimal
    quantity: int
    discount_value: Decimal
    total_value: Decimal
    campaign_id: uuid.UUID | None
    cashback_value: Decimal
    extended_term_days: int
    region_code: str | None


class OrderPricingEngine:
    """Stateless; one instance can be shared."""

    def validate_lines(self, lines: Sequence[LineRequest]) -> None:
        if not lines:
            raise ValidationError("order must contain at least one item")
        seen: set[uuid.UUID] = set()
        for line in lines:
            if line.quantity < 1:
                raise ValidationError("Item quantity must be at least 1")
            if line.product_id in seen:
                raise ValidationError(f"Product {line.product_id} appears more than once")
            seen.add(line.product_id)

    def supplier_of(self, products: Sequence[Product]) -> uuid.UUID:
        """The single supplier every product belongs to."""
        suppliers = {product.supplier_id for product in products}
        if len(suppliers) != 1:
            raise ValidationError("All items of an order must come from the same supplier")
        return suppliers.pop()

    def unit_price_for(
        self, line: LineRequest, product: Product, condition: CommercialCondition | None
    ) -> Decimal:
        if line.unit_price is not None:
            return to_money(line.unit_price)
        price = Decimal(product.unit_price)
        if condition is not None:
            price += Decimal(condition.unit_price_variance)
        return max(to_money(price), ZERO)

    def price_lines(
        self,
        lines: Sequence[LineRequest],
        products: Mapping[uuid.UUID, Product],
        condition: CommercialCondition | None = None,
    ) -> list[PricedLine]:
        priced = []
        for line in lines:
            unit_price = self.unit_price_for(line, products[line.product_id], condition)
            priced.append(
                PricedLine(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=unit_price,
                    subtotal=to_money(unit_price * line.quantity),
                )
            )
        return priced

    def candidate(self, lines: Sequence[PricedLine]) -> tuple[Decimal, int]:
        """Pre-discount value and total quantity, used for campaign eligibility."""
        value = sum((line.subtotal for line in lines), ZERO)
        quantity = sum(line.quantity for line in lines)
        return to_money(value), quantity

    def finalize(
        self,
        lines: Sequence[PricedLine],
        campaign: PromotionalCampaign | None = None,
        condition: CommercialCondition | None = None,
    ) -> PricedOrder:
        value, quantity = self.candidate(lines)
        eligible = campaign is not None and is_eligible(campaign, value, quantity)
        applied = campaign if eligible else None
        total = apply_discount(applied, value, quantity)

        if condition is not None:
            cashback = percentage_of(total, condition.cashback_percentage)
            extended_term_days = condition.extended_term_days
            region_code = condition.region_code
        else:
            cashback, extended_term_days, region_code = ZERO, 0, None

        return PricedOrder(
            lines=tuple(lines),
            subtotal_value=value,
            quantity=quantity,
            discount_value=value - total,
            total_value=total,
            campaign_id=applied.id if applied is not None else None,
            cashback_value=cashback,
            extended_term_days=extended_term_days,
            region_code=region_code,
        )
