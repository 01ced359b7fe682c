"""Commercial condition schemas."""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class CommercialConditionCreate(BaseModel):
    # Checked against the valid region set by the service.
    region_code: str = Field(..., max_length=2)
    cashback_percentage: Decimal = Field(..., ge=0, le=100, decimal_places=2)
    extended_term_days: int = Field(..., ge=0)
    unit_price_variance: Decimal = Field(..., decimal_places=2)
    supplier_id: uuid.UUID


class CommercialConditionUpdate(BaseModel):
    cashback_percentage: Decimal | None = Field(None, ge=0, le=100, decimal_places=2)
    extended_term_days: int | None = Field(None, ge=0)
    unit_price_variance: Decimal | None = Field(None, decimal_places=2)

    model_config = {"extra": "forbid"}


class CommercialConditionResponse(BaseModel):
    id: uuid.UUID
    region_code: str
    cashback_percentage: Decimal
    extended_term_days: int
    unit_price_variance: Decimal
    supplier_id: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
