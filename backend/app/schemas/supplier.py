"""Supplier schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import TaxId


class SupplierCreate(BaseModel):
    tax_id: TaxId
    legal_name: str | None = Field(None, max_length=150)
    trade_name: str | None = Field(None, max_length=100)
    description: str = Field(..., min_length=2, max_length=500)
    # Defaults to the caller; only admins may register a supplier for someone else.
    user_id: uuid.UUID | None = None


class SupplierUpdate(BaseModel):
    tax_id: TaxId | None = None
    legal_name: str | None = Field(None, max_length=150)
    trade_name: str | None = Field(None, max_length=100)
    description: str | None = Field(None, min_length=2, max_length=500)

    model_config = {"extra": "forbid"}


class SupplierResponse(BaseModel):
    id: uuid.UUID
    tax_id: str
    legal_name: str | None
    trade_name: str | None
    description: str
    user_id: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
