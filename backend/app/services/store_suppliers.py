"""Links between stores and the suppliers they buy from.

A store may only order from suppliers it is linked to. Only the store's
owner (or an admin) can create or remove a link.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ConflictError, NotFoundError
from app.models import Store, StoreSupplier, Supplier
from app.repository import Repository
from app.schemas.common import ServiceResponse
from app.schemas.store import StoreSupplierCreate
from app.services.ownership import OwnershipResolver

logger = logging.getLogger(__name__)

_ALREADY_LINKED = "Store is already linked to this supplier"


class StoreSupplierService:
    def __init__(self, session: AsyncSession, ownership: OwnershipResolver | None = None) -> None:
        self.session = session
        self.links = Repository(session, StoreSupplier, conflict_message=_ALREADY_LINKED)
        self.ownership = ownership or OwnershipResolver(session)

    async def _find_link(self, store_id: uuid.UUID, supplier_id: uuid.UUID) -> StoreSupplier | None:
        return await self.links.find_one(
            StoreSupplier.store_id == store_id, StoreSupplier.supplier_id == supplier_id
        )

    async def list_all(self, caller: Caller) -> ServiceResponse[list[StoreSupplier]]:
        criteria = []
        if not caller.is_admin:
            store_ids = await self.ownership.store_ids_for(caller)
            supplier_ids = await self.ownership.supplier_ids_for(caller)
            criteria.append(
                StoreSupplier.store_id.in_(store_ids) | StoreSupplier.supplier_id.in_(supplier_ids)
            )
        return ServiceResponse("Links retrieved", await self.links.find_many(*criteria))

    async def suppliers_of_store(self, store_id: uuid.UUID) -> ServiceResponse[list[Supplier]]:
        await self.ownership.get_store(store_id)
        result = await self.session.execute(
            select(Supplier)
            .join(StoreSupplier, StoreSupplier.supplier_id == Supplier.id)
            .where(
                StoreSupplier.store_id == store_id,
                StoreSupplier.deleted_at.is_(None),
                Supplier.deleted_at.is_(None),
            )
            .order_by(Supplier.created_at)
        )
        return ServiceResponse("Suppliers retrieved", list(result.scalars().all()))

    async def stores_of_supplier(self, supplier_id: uuid.UUID) -> ServiceResponse[list[Store]]:
        await self.ownership.get_supplier(supplier_id)
        result = await self.session.execute(
            select(Store)
            .join(StoreSupplier, StoreSupplier.store_id == Store.id)
            .where(
                StoreSupplier.supplier_id == supplier_id,
                StoreSupplier.deleted_at.is_(None),
                Store.deleted_at.is_(None),
            )
            .order_by(Store.created_at)
        )
        return ServiceResponse("Stores retrieved", list(result.scalars().all()))

    async def create(self, payload: StoreSupplierCreate, caller: Caller) -> ServiceResponse[StoreSupplier]:
        await self.ownership.require_store_owner(payload.store_id, caller)
        await self.ownership.get_supplier(payload.supplier_id)
        if await self._find_link(payload.store_id, payload.supplier_id) is not None:
            raise ConflictError(_ALREADY_LINKED)

        link = await self.links.insert(
            StoreSupplier(store_id=payload.store_id, supplier_id=payload.supplier_id)
        )
        logger.info("Store %s linked to supplier %s", link.store_id, link.supplier_id)
        return ServiceResponse("Store linked to supplier", link)

    async def delete(
        self, store_id: uuid.UUID, supplier_id: uuid.UUID, caller: Caller
    ) -> ServiceResponse[None]:
        await self.ownership.require_store_owner(store_id, caller)
        link = await self._find_link(store_id, supplier_id)
        if link is None:
            raise NotFoundError("Link not found")
        await self.links.soft_delete(link)
        logger.info("Store %s unlinked from supplier %s", store_id, supplier_id)
        return ServiceResponse("Store unlinked from supplier")
