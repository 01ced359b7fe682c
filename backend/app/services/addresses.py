"""Postal addresses. The creating user owns the record."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import NotFoundError, ValidationError
from app.models import Address
from app.repository import Repository
from app.schemas.address import AddressCreate, AddressUpdate, normalize_postal_code
from app.schemas.common import ServiceResponse
from app.services.ownership import assert_ownership

logger = logging.getLogger(__name__)


class AddressService:
    def __init__(self, session: AsyncSession) -> None:
        self.addresses = Repository(session, Address)

    async def _load(self, address_id: uuid.UUID) -> Address:
        address = await self.addresses.get(address_id)
        if address is None:
            raise NotFoundError("Address not found")
        return address

    async def list_all(self, caller: Caller) -> ServiceResponse[list[Address]]:
        criteria = [] if caller.is_admin else [Address.user_id == caller.id]
        return ServiceResponse("Addresses retrieved", await self.addresses.find_many(*criteria))

    async def get(self, address_id: uuid.UUID) -> ServiceResponse[Address]:
        return ServiceResponse("Address retrieved", await self._load(address_id))

    async def by_postal_code(self, postal_code: str) -> ServiceResponse[list[Address]]:
        try:
            code = normalize_postal_code(postal_code)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        addresses = await self.addresses.find_many(Address.postal_code == code)
        return ServiceResponse("Addresses retrieved", addresses)

    async def create(self, payload: AddressCreate, caller: Caller) -> ServiceResponse[Address]:
        address = await self.addresses.insert(Address(**payload.model_dump(), user_id=caller.id))
        logger.info("Address %s created by %s", address.id, caller.id)
        return ServiceResponse("Address created", address)

    async def update(
        self, address_id: uuid.UUID, payload: AddressUpdate, caller: Caller
    ) -> ServiceResponse[Address]:
        address = await self._load(address_id)
        assert_ownership(address.user_id, caller)
        values = payload.model_dump(exclude_unset=True)
        values = {f: v for f, v in values.items() if v is not None or f == "complement"}
        return ServiceResponse("Address updated", await self.addresses.update(address, values))

    async def delete(self, address_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        address = await self._load(address_id)
        assert_ownership(address.user_id, caller)
        await self.addresses.soft_delete(address)
        return ServiceResponse("Address deleted")
