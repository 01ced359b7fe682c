"""Stores: the buying side of the marketplace."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ConflictError, ForbiddenError, NotFoundError
from app.models import Address, Store, User
from app.models.enums import UserRole
from app.repository import ExistenceChecker, Repository
from app.schemas.common import ServiceResponse
from app.schemas.store import StoreCreate, StoreUpdate
from app.services.ownership import OwnershipResolver, assert_role

logger = logging.getLogger(__name__)

_TAX_ID_TAKEN = "A store with this tax id already exists"


class StoreService:
    def __init__(
        self,
        session: AsyncSession,
        *,
        users: ExistenceChecker | None = None,
        addresses: ExistenceChecker | None = None,
        ownership: OwnershipResolver | None = None,
    ) -> None:
        self.stores = Repository(session, Store, conflict_message=_TAX_ID_TAKEN)
        self.users = users or Repository(session, User)
        self.addresses = addresses or Repository(session, Address)
        self.ownership = ownership or OwnershipResolver(session)

    async def _ensure_tax_id_free(self, tax_id: str, exclude_id: uuid.UUID | None = None) -> None:
        criteria = [Store.tax_id == tax_id]
        if exclude_id is not None:
            criteria.append(Store.id != exclude_id)
        if await self.stores.find_one(*criteria) is not None:
            raise ConflictError(_TAX_ID_TAKEN)

    async def _check_references(self, user_id: uuid.UUID | None, address_id: uuid.UUID | None) -> None:
        if user_id is not None and not await self.users.exists(user_id):
            raise NotFoundError("User not found")
        if address_id is not None and not await self.addresses.exists(address_id):
            raise NotFoundError("Address not found")

    async def list_all(self) -> ServiceResponse[list[Store]]:
        return ServiceResponse("Stores retrieved", await self.stores.find_many())

    async def list_mine(self, caller: Caller) -> ServiceResponse[list[Store]]:
        stores = await self.stores.find_many(Store.user_id == caller.id)
        return ServiceResponse("Stores retrieved", stores)

    async def get(self, store_id: uuid.UUID) -> ServiceResponse[Store]:
        return ServiceResponse("Store retrieved", await self.ownership.get_store(store_id))

    async def create(self, payload: StoreCreate, caller: Caller) -> ServiceResponse[Store]:
        assert_role(caller, UserRole.STORE.value)
        owner_id = payload.user_id or caller.id
        if owner_id != caller.id and not caller.is_admin:
            raise ForbiddenError("You can only register stores for yourself")
        await self._check_references(owner_id, payload.address_id)
        await self._ensure_tax_id_free(payload.tax_id)

        store = await self.stores.insert(
            Store(
                name=payload.name,
                tax_id=payload.tax_id,
                user_id=owner_id,
                address_id=payload.address_id,
            )
        )
        logger.info("Store %s created for user %s", store.id, owner_id)
        return ServiceResponse("Store created", store)

    async def update(
        self, store_id: uuid.UUID, payload: StoreUpdate, caller: Caller
    ) -> ServiceResponse[Store]:
        store = await self.ownership.require_store_owner(store_id, caller)
        values = payload.model_dump(exclude_unset=True)
        values = {f: v for f, v in values.items() if v is not None or f == "address_id"}

        if "user_id" in values and values["user_id"] != store.user_id and not caller.is_admin:
            raise ForbiddenError("Only an admin can transfer a store")
        await self._check_references(values.get("user_id"), values.get("address_id"))
        if "tax_id" in values and values["tax_id"] != store.tax_id:
            await self._ensure_tax_id_free(values["tax_id"], exclude_id=store.id)

        return ServiceResponse("Store updated", await self.stores.update(store, values))

    async def delete(self, store_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        store = await self.ownership.require_store_owner(store_id, caller)
        await self.stores.soft_delete(store)
        logger.info("Store %s deleted by %s", store.id, caller.id)
        return ServiceResponse("Store deleted")
