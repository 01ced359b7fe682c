"""Address schemas."""

import re
import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.models.enums import VALID_REGION_CODES

_POSTAL_CODE = re.compile(r"^\d{5}-?\d{3}$")


def normalize_postal_code(value: str) -> str:
    value = value.strip()
    if not _POSTAL_CODE.match(value):
        raise ValueError("Invalid postal code, use 12345-678 or 12345678")
    return value.replace("-", "")


def _normalize_state(value: str) -> str:
    value = value.strip().upper()
    if value not in VALID_REGION_CODES:
        raise ValueError("State must be a valid two-letter code (e.g. SP, RJ, MG)")
    return value


class AddressCreate(BaseModel):
    state: str
    city: str = Field(..., min_length=2, max_length=100)
    district: str = Field(..., min_length=2, max_length=100)
    street: str = Field(..., min_length=3, max_length=200)
    number: str = Field(..., min_length=1, max_length=10)
    complement: str | None = Field(None, max_length=100)
    postal_code: str

    @field_validator("state")
    @classmethod
    def _state(cls, value: str) -> str:
        return _normalize_state(value)

    @field_validator("postal_code")
    @classmethod
    def _postal(cls, value: str) -> str:
        return normalize_postal_code(value)


class AddressUpdate(BaseModel):
    state: str | None = None
    city: str | None = Field(None, min_length=2, max_length=100)
    district: str | None = Field(None, min_length=2, max_length=100)
    street: str | None = Field(None, min_length=3, max_length=200)
    number: str | None = Field(None, min_length=1, max_length=10)
    complement: str | None = Field(None, max_length=100)
    postal_code: str | None = None

    model_config = {"extra": "forbid"}

    @field_validator("state")
    @classmethod
    def _state(cls, value: str | None) -> str | None:
        return None if value is None else _normalize_state(value)

    @field_validator("postal_code")
    @classmethod
    def _postal(cls, value: str | None) -> str | None:
        return None if value is None else normalize_postal_code(value)


class AddressResponse(BaseModel):
    id: uuid.UUID
    state: str
    city: str
    district: str
    street: str
    number: str
    complement: str | None
    postal_code: str
    created_at: datetime

    model_config = {"from_attributes": True}
