"""Order schemas.

``OrderCreate`` carries no money totals: anything like ``total_value`` in
the request body is dropped and the total is computed server-side.
"""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from app.models.enums import OrderStatus, PaymentMethod


class OrderItemCreate(BaseModel):
    product_id: uuid.UUID
    quantity: int = Field(..., ge=1)
    # When omitted the live catalog price (plus regional variance) is used.
    unit_price: Decimal | None = Field(None, ge=0, decimal_places=2)


class OrderCreate(BaseModel):
    store_id: uuid.UUID
    description: str | None = Field(None, max_length=500)
    payment_method: PaymentMethod
    delivery_days: int = Field(..., ge=1, le=365)
    items: list[OrderItemCreate]

    model_config = {"use_enum_values": True}


class OrderUpdate(BaseModel):
    description: str | None = Field(None, max_length=500)
    payment_method: PaymentMethod | None = None
    delivery_days: int | None = Field(None, ge=1, le=365)
    status: OrderStatus | None = None

    model_config = {"extra": "forbid", "use_enum_values": True}


class OrderStatusUpdate(BaseModel):
    status: OrderStatus

    model_config = {"use_enum_values": True}


class OrderItemResponse(BaseModel):
    id: uuid.UUID
    product_id: uuid.UUID
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    model_config = {"from_attributes": True}


class OrderResponse(BaseModel):
    id: uuid.UUID
    description: str | None
    user_id: uuid.UUID
    store_id: uuid.UUID
    supplier_id: uuid.UUID
    campaign_id: uuid.UUID | None
    status: str
    payment_method: str
    delivery_days: int
    subtotal_value: Decimal
    discount_value: Decimal
    total_value: Decimal
    cashback_value: Decimal
    extended_term_days: int
    region_code: str | None
    created_at: datetime
    shipped_at: datetime | None
    delivered_at: datetime | None
    items: list[OrderItemResponse] = []

    model_config = {"from_attributes": True}
