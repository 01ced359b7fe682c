"""Product schemas."""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=200)
    description: str = Field(..., min_length=10, max_length=1000)
    unit_price: Decimal = Field(..., gt=0, decimal_places=2)
    stock_quantity: int = Field(..., ge=0)
    category: str = Field(..., min_length=2, max_length=100)
    image_url: str | None = None
    supplier_id: uuid.UUID


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=200)
    description: str | None = Field(None, min_length=10, max_length=1000)
    unit_price: Decimal | None = Field(None, gt=0, decimal_places=2)
    stock_quantity: int | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=2, max_length=100)
    image_url: str | None = None

    model_config = {"extra": "forbid"}


class ProductResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str
    unit_price: Decimal
    stock_quantity: int
    category: str
    image_url: str | None
    supplier_id: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
