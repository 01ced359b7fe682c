"""Order placement, queries and status changes.

Creating an order runs, in order: store ownership check, line
validation, product and supplier resolution, store-supplier link check,
commercial condition lookup for the store's state, line pricing,
campaign selection and a single flush of the order with its items.
"""

import logging
import uuid
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ForbiddenError, NotFoundError, ValidationError
from app.models import Address, Order, OrderItem, Product, Store, StoreSupplier
from app.repository import Repository
from app.schemas.common import ServiceResponse
from app.schemas.order import OrderCreate, OrderUpdate
from app.services import order_lifecycle
from app.services.campaigns import CampaignDiscountEvaluator
from app.services.commercial_conditions import CommercialTermsResolver
from app.services.ownership import OwnershipResolver, assert_ownership
from app.services.pricing import LineRequest, OrderPricingEngine

logger = logging.getLogger(__name__)


def _day_start(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class OrderService:
    def __init__(
        self,
        session: AsyncSession,
        *,
        ownership: OwnershipResolver | None = None,
        engine: OrderPricingEngine | None = None,
        evaluator: CampaignDiscountEvaluator | None = None,
        terms: CommercialTermsResolver | None = None,
    ) -> None:
        self.orders = Repository(session, Order)
        self.products = Repository(session, Product)
        self.links = Repository(session, StoreSupplier)
        self.addresses = Repository(session, Address)
        self.ownership = ownership or OwnershipResolver(session)
        self.engine = engine or OrderPricingEngine()
        self.evaluator = evaluator or CampaignDiscountEvaluator(session)
        self.terms = terms or CommercialTermsResolver(session)

    # ------------------------------------------------------------------
    # Access helpers
    # ------------------------------------------------------------------

    async def _load(self, order_id: uuid.UUID) -> Order:
        order = await self.orders.get(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def _require_party(self, order: Order, caller: Caller) -> None:
        """Store owner, supplier owner or admin."""
        if caller.is_admin:
            return
        if await self.ownership.owns_store(order.store_id, caller):
            return
        if await self.ownership.owns_supplier(order.supplier_id, caller):
            return
        logger.warning("User %s denied access to order %s", caller.id, order.id)
        raise ForbiddenError("You are not a party to this order")

    async def _require_store_side(self, order: Order, caller: Caller) -> None:
        store = await self.ownership.stores.get(order.store_id)
        owner_id = store.user_id if store is not None else None
        assert_ownership(owner_id, caller, "Only the ordering store can change this order")

    async def _region_of(self, store: Store) -> str | None:
        if store.address_id is None:
            return None
        address = await self.addresses.get(store.address_id)
        return address.state if address is not None else None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_all(
        self,
        caller: Caller,
        *,
        store_id: uuid.UUID | None = None,
        supplier_id: uuid.UUID | None = None,
        status: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> ServiceResponse[list[Order]]:
        criteria = []
        if store_id is not None:
            criteria.append(Order.store_id == store_id)
        if supplier_id is not None:
            criteria.append(Order.supplier_id == supplier_id)
        if status is not None:
            criteria.append(Order.status == status)
        if date_from is not None:
            criteria.append(Order.created_at >= _day_start(date_from))
        if date_to is not None:
            criteria.append(Order.created_at < _day_start(date_to + timedelta(days=1)))
        if not caller.is_admin:
            store_ids = await self.ownership.store_ids_for(caller)
            supplier_ids = await self.ownership.supplier_ids_for(caller)
            criteria.append(
                or_(
                    Order.user_id == caller.id,
                    Order.store_id.in_(store_ids),
                    Order.supplier_id.in_(supplier_ids),
                )
            )
        orders = await self.orders.find_many(*criteria)
        return ServiceResponse("Orders retrieved", orders)

    async def list_mine(self, caller: Caller) -> ServiceResponse[list[Order]]:
        orders = await self.orders.find_many(Order.user_id == caller.id)
        return ServiceResponse("Orders retrieved", orders)

    async def get(self, order_id: uuid.UUID, caller: Caller) -> ServiceResponse[Order]:
        order = await self._load(order_id)
        await self._require_party(order, caller)
        return ServiceResponse("Order retrieved", order)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create(self, payload: OrderCreate, caller: Caller) -> ServiceResponse[Order]:
        store = await self.ownership.require_store_owner(payload.store_id, caller)

        requested = [
            LineRequest(product_id=item.product_id, quantity=item.quantity, unit_price=item.unit_price)
            for item in payload.items
        ]
        self.engine.validate_lines(requested)

        ids = [line.product_id for line in requested]
        found = await self.products.find_many(Product.id.in_(ids))
        products = {product.id: product for product in found}
        for product_id in ids:
            if product_id not in products:
                raise NotFoundError("Product not found")

        supplier_id = self.engine.supplier_of(found)
        await self.ownership.get_supplier(supplier_id)
        link = await self.links.find_one(
            StoreSupplier.store_id == store.id, StoreSupplier.supplier_id == supplier_id
        )
        if link is None:
            raise ValidationError("Store is not linked to this supplier")

        region = await self._region_of(store)
        condition = await self.terms.resolve(supplier_id, region) if region else None

        lines = self.engine.price_lines(requested, products, condition)
        value, quantity = self.engine.candidate(lines)
        campaign = await self.evaluator.select_applicable_campaign(supplier_id, value, quantity)
        priced = self.engine.finalize(lines, campaign, condition)

        order = Order(
            description=payload.description,
            user_id=caller.id,
            store_id=store.id,
            supplier_id=supplier_id,
            campaign_id=priced.campaign_id,
            status=order_lifecycle.INITIAL_STATUS,
            payment_method=payload.payment_method,
            delivery_days=payload.delivery_days,
            subtotal_value=priced.subtotal_value,
            discount_value=priced.discount_value,
            total_value=priced.total_value,
            cashback_value=priced.cashback_value,
            extended_term_days=priced.extended_term_days,
            region_code=priced.region_code,
            items=[
                OrderItem(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                    subtotal=line.subtotal,
                )
                for line in priced.lines
            ],
        )
        await self.orders.insert(order)
        logger.info(
            "Order %s created: store=%s supplier=%s total=%s campaign=%s",
            order.id, store.id, supplier_id, order.total_value, order.campaign_id,
        )
        return ServiceResponse("Order created", order)

    async def update(
        self, order_id: uuid.UUID, payload: OrderUpdate, caller: Caller
    ) -> ServiceResponse[Order]:
        order = await self._load(order_id)
        values = payload.model_dump(exclude_unset=True)
        target = values.pop("status", None)
        values = {
            field: value
            for field, value in values.items()
            if value is not None or field == "description"
        }

        if values:
            await self._require_store_side(order, caller)
            order_lifecycle.ensure_editable(order)
            order = await self.orders.update(order, values)
        if target is not None:
            return await self._transition(order, target, caller)
        return ServiceResponse("Order updated", order)

    async def change_status(
        self, order_id: uuid.UUID, target: str, caller: Caller
    ) -> ServiceResponse[Order]:
        order = await self._load(order_id)
        return await self._transition(order, target, caller)

    async def _transition(self, order: Order, target: str, caller: Caller) -> ServiceResponse[Order]:
        await self._require_party(order, caller)
        order_lifecycle.transition(order, target)
        order = await self.orders.update(order, {})
        return ServiceResponse(f"Order {order.status}", order)

    async def delete(self, order_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        order = await self._load(order_id)
        await self._require_store_side(order, caller)
        order_lifecycle.ensure_deletable(order)
        await self.orders.soft_delete(order)
        logger.info("Order %s deleted by %s (status kept: %s)", order.id, caller.id, order.status)
        return ServiceResponse("Order deleted")
