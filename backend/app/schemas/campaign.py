"""Promotional campaign schemas."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.models.enums import CampaignStatus


class CampaignCreate(BaseModel):
    name: str = Field(..., min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)
    min_value: Decimal | None = Field(None, ge=0, decimal_places=2)
    min_quantity: int | None = Field(None, ge=1)
    discount_percentage: Decimal = Field(..., ge=0, le=100, decimal_places=2)
    status: Literal["active", "inactive"] = "active"
    supplier_id: uuid.UUID

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class CampaignUpdate(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)
    min_value: Decimal | None = Field(None, ge=0, decimal_places=2)
    min_quantity: int | None = Field(None, ge=1)
    discount_percentage: Decimal | None = Field(None, ge=0, le=100, decimal_places=2)
    status: CampaignStatus | None = None

    model_config = {"extra": "forbid", "use_enum_values": True}


class CampaignResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    min_value: Decimal | None
    min_quantity: int | None
    discount_percentage: Decimal
    status: str
    supplier_id: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
