"""Ownership resolution and the authorization checks run before mutations.

Stores and suppliers are owned by a user; everything below them (links,
products, conditions, campaigns, orders) inherits ownership through
them. Admins pass every check.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ForbiddenError, NotFoundError
from app.models import Store, Supplier
from app.repository import Repository

logger = logging.getLogger(__name__)


def assert_ownership(owner_id: uuid.UUID | None, caller: Caller, message: str | None = None) -> None:
    """Raise ``ForbiddenError`` unless *caller* owns the resource or is an admin."""
    if caller.is_admin or (owner_id is not None and owner_id == caller.id):
        return
    logger.warning("Ownership check denied user %s (owner %s)", caller.id, owner_id)
    raise ForbiddenError(message)


def assert_role(caller: Caller, *roles: str) -> None:
    if caller.is_admin or caller.role in roles:
        return
    logger.warning("Role check denied user %s with role %s", caller.id, caller.role)
    raise ForbiddenError("Your role does not allow this action")


class OwnershipResolver:
    """Loads stores/suppliers and answers "does the caller control this"."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.stores = Repository(session, Store)
        self.suppliers = Repository(session, Supplier)

    async def get_store(self, store_id: uuid.UUID) -> Store:
        store = await self.stores.get(store_id)
        if store is None:
            raise NotFoundError("Store not found")
        return store

    async def get_supplier(self, supplier_id: uuid.UUID) -> Supplier:
        supplier = await self.suppliers.get(supplier_id)
        if supplier is None:
            raise NotFoundError("Supplier not found")
        return supplier

    async def require_store_owner(self, store_id: uuid.UUID, caller: Caller) -> Store:
        store = await self.get_store(store_id)
        assert_ownership(store.user_id, caller, "You do not own this store")
        return store

    async def require_supplier_owner(self, supplier_id: uuid.UUID, caller: Caller) -> Supplier:
        supplier = await self.get_supplier(supplier_id)
        assert_ownership(supplier.user_id, caller, "You do not own this supplier")
        return supplier

    async def owns_store(self, store_id: uuid.UUID, caller: Caller) -> bool:
        store = await self.stores.get(store_id)
        return store is not None and (caller.is_admin or store.user_id == caller.id)

    async def owns_supplier(self, supplier_id: uuid.UUID, caller: Caller) -> bool:
        supplier = await self.suppliers.get(supplier_id)
        return supplier is not None and (caller.is_admin or supplier.user_id == caller.id)

    async def supplier_ids_for(self, caller: Caller) -> list[uuid.UUID]:
        result = await self.session.execute(
            select(Supplier.id).where(
                Supplier.user_id == caller.id, Supplier.deleted_at.is_(None)
            )
        )
        return list(result.scalars().all())

    async def store_ids_for(self, caller: Caller) -> list[uuid.UUID]:
        result = await self.session.execute(
            select(Store.id).where(Store.user_id == caller.id, Store.deleted_at.is_(None))
        )
        return list(result.scalars().all())
