"""Tests for order pricing and campaign discounts."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.errors import ValidationError
from app.models import CommercialCondition, Product, PromotionalCampaign
from app.services.campaigns import apply_discount, best_campaign, is_eligible
from app.services.pricing import LineRequest, OrderPricingEngine

SUPPLIER = uuid.uuid4()
T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def product(price: str, supplier_id: uuid.UUID = SUPPLIER) -> Product:
    return Product(id=uuid.uuid4(), name="Item", unit_price=Decimal(price), supplier_id=supplier_id)


def campaign(
    discount: str,
    min_value: str | None = None,
    min_quantity: int | None = None,
    status: str = "active",
    created_at: datetime = T0,
    deleted_at: datetime | None = None,
) -> PromotionalCampaign:
    return PromotionalCampaign(
        id=uuid.uuid4(),
        name=f"Promo {discount}",
        discount_percentage=Decimal(discount),
        min_value=Decimal(min_value) if min_value is not None else None,
        min_quantity=min_quantity,
        status=status,
        supplier_id=SUPPLIER,
        created_at=created_at,
        deleted_at=deleted_at,
    )


def condition(variance: str = "0.00", cashback: str = "0.00", term: int = 0) -> CommercialCondition:
    return CommercialCondition(
        region_code="SP",
        unit_price_variance=Decimal(variance),
        cashback_percentage=Decimal(cashback),
        extended_term_days=term,
        supplier_id=SUPPLIER,
    )


class TestApplyDiscount:
    def test_active_campaign(self):
        assert apply_discount(campaign("10"), Decimal("120.00")) == Decimal("108.00")

    def test_rounds_half_up(self):
        # 10.05 * 0.95 = 9.5475
        assert apply_discount(campaign("5"), Decimal("10.05")) == Decimal("9.55")

    def test_none_returns_value(self):
        assert apply_discount(None, Decimal("50.00")) == Decimal("50.00")

    @pytest.mark.parametrize("status", ["inactive", "expired"])
    def test_not_active_returns_value(self, status):
        assert apply_discount(campaign("10", status=status), Decimal("50.00")) == Decimal("50.00")

    def test_deleted_returns_value(self):
        deleted = campaign("10", deleted_at=T0)
        assert apply_discount(deleted, Decimal("50.00")) == Decimal("50.00")

    def test_full_discount_floors_at_zero(self):
        assert apply_discount(campaign("100"), Decimal("80.00")) == Decimal("0.00")

    def test_below_min_value_returns_value(self):
        promo = campaign("10", min_value="100.00")
        assert apply_discount(promo, Decimal("90.00")) == Decimal("90.00")
        assert apply_discount(promo, Decimal("100.00")) == Decimal("90.00")

    def test_below_min_quantity_returns_value(self):
        promo = campaign("10", min_quantity=5)
        assert apply_discount(promo, Decimal("200.00"), 4) == Decimal("200.00")
        assert apply_discount(promo, Decimal("200.00"), 5) == Decimal("180.00")


class TestCampaignSelection:
    def test_min_value_not_reached(self):
        assert not is_eligible(campaign("10", min_value="100.00"), Decimal("90.00"), 3)

    def test_min_quantity_not_reached(self):
        assert not is_eligible(campaign("10", min_quantity=5), Decimal("500.00"), 4)

    def test_both_thresholds_met(self):
        assert is_eligible(campaign("10", min_value="100.00", min_quantity=3), Decimal("100.00"), 3)

    def test_highest_discount_wins(self):
        low, high = campaign("5"), campaign("15")
        assert best_campaign([low, high], Decimal("10.00"), 1) is high

    def test_tie_broken_by_age(self):
        older = campaign("10", created_at=T0)
        newer = campaign("10", created_at=T0 + timedelta(days=1))
        assert best_campaign([newer, older], Decimal("10.00"), 1) is older

    def test_tie_broken_by_id(self):
        a, b = campaign("10"), campaign("10")
        expected = min((a, b), key=lambda c: str(c.id))
        assert best_campaign([a, b], Decimal("10.00"), 1) is expected

    def test_ineligible_never_selected(self):
        big = campaign("50", min_value="1000.00")
        assert best_campaign([big], Decimal("999.99"), 10) is None


class TestOrderPricingEngine:
    def setup_method(self):
        self.engine = OrderPricingEngine()

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            self.engine.validate_lines([])

    def test_duplicate_product_rejected(self):
        pid = uuid.uuid4()
        with pytest.raises(ValidationError):
            self.engine.validate_lines([LineRequest(pid, 1), LineRequest(pid, 2)])

    def test_mixed_suppliers_rejected(self):
        with pytest.raises(ValidationError, match="same supplier"):
            self.engine.supplier_of([product("1.00"), product("1.00", uuid.uuid4())])

    def test_campaign_applied_to_total(self):
        items = [product("40.00") for _ in range(3)]
        products = {p.id: p for p in items}
        lines = self.engine.price_lines([LineRequest(p.id, 1) for p in items], products)
        value, quantity = self.engine.candidate(lines)
        promo = campaign("10", min_value="100.00")

        priced = self.engine.finalize(lines, best_campaign([promo], value, quantity))

        assert priced.subtotal_value == Decimal("120.00")
        assert priced.discount_value == Decimal("12.00")
        assert priced.total_value == Decimal("108.00")
        assert priced.campaign_id == promo.id
        assert [line.unit_price for line in priced.lines] == [Decimal("40.00")] * 3

    def test_below_campaign_minimum(self):
        items = [product("30.00") for _ in range(3)]
        products = {p.id: p for p in items}
        lines = self.engine.price_lines([LineRequest(p.id, 1) for p in items], products)
        value, quantity = self.engine.candidate(lines)

        chosen = best_campaign([campaign("10", min_value="100.00")], value, quantity)
        priced = self.engine.finalize(lines, chosen)

        assert chosen is None
        assert priced.total_value == Decimal("90.00")
        assert priced.campaign_id is None

    def test_ineligible_campaign_not_applied(self):
        items = [product("30.00") for _ in range(3)]
        products = {p.id: p for p in items}
        lines = self.engine.price_lines([LineRequest(p.id, 1) for p in items], products)

        priced = self.engine.finalize(lines, campaign("10", min_value="100.00"))

        assert priced.total_value == Decimal("90.00")
        assert priced.discount_value == Decimal("0.00")
        assert priced.campaign_id is None

    def test_campaign_below_min_quantity_not_applied(self):
        p = product("60.00")
        lines = self.engine.price_lines([LineRequest(p.id, 2)], {p.id: p})

        priced = self.engine.finalize(lines, campaign("10", min_quantity=3))

        assert priced.total_value == Decimal("120.00")
        assert priced.campaign_id is None

    def test_entered_unit_price_kept(self):
        p = product("40.00")
        lines = self.engine.price_lines(
            [LineRequest(p.id, 2, Decimal("35.50"))], {p.id: p}, condition("5.00")
        )
        assert lines[0].unit_price == Decimal("35.50")
        assert lines[0].subtotal == Decimal("71.00")

    def test_variance_added_to_catalog_price(self):
        p = product("40.00")
        lines = self.engine.price_lines([LineRequest(p.id, 2)], {p.id: p}, condition("-2.50"))
        assert lines[0].unit_price == Decimal("37.50")
        assert lines[0].subtotal == Decimal("75.00")

    def test_negative_price_floored_at_zero(self):
        p = product("1.00")
        lines = self.engine.price_lines([LineRequest(p.id, 1)], {p.id: p}, condition("-5.00"))
        assert lines[0].unit_price == Decimal("0.00")

    def test_condition_snapshot(self):
        p = product("50.00")
        terms = condition(cashback="2.00", term=30)
        lines = self.engine.price_lines([LineRequest(p.id, 2)], {p.id: p}, terms)
        priced = self.engine.finalize(lines, None, terms)

        assert priced.total_value == Decimal("100.00")
        assert priced.cashback_value == Decimal("2.00")
        assert priced.extended_term_days == 30
        assert priced.region_code == "SP"

    def test_no_condition_defaults(self):
        p = product("10.00")
        priced = self.engine.finalize(self.engine.price_lines([LineRequest(p.id, 1)], {p.id: p}))
        assert priced.cashback_value == Decimal("0.00")
        assert priced.extended_term_days == 0
        assert priced.region_code is None
