"""Store and store-supplier link schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import TaxId


class StoreCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=200)
    tax_id: TaxId
    user_id: uuid.UUID | None = None
    address_id: uuid.UUID | None = None


class StoreUpdate(BaseModel):
    name: str | None = Field(None, min_length=2, max_length=200)
    tax_id: TaxId | None = None
    user_id: uuid.UUID | None = None
    address_id: uuid.UUID | None = None

    model_config = {"extra": "forbid"}


class StoreResponse(BaseModel):
    id: uuid.UUID
    name: str
    tax_id: str
    user_id: uuid.UUID
    address_id: uuid.UUID | None
    created_at: datetime

    model_config = {"from_attributes": True}


class StoreSupplierCreate(BaseModel):
    store_id: uuid.UUID
    supplier_id: uuid.UUID


class StoreSupplierResponse(BaseModel):
    id: uuid.UUID
    store_id: uuid.UUID
    supplier_id: uuid.UUID
    created_at: datetime

    model_config = {"from_attributes": True}
