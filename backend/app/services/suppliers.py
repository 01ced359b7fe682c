"""Supplier registration and maintenance."""

import logging
import re
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from app.models import Supplier, User
from app.models.enums import UserRole
from app.repository import ExistenceChecker, Repository
from app.schemas.common import ServiceResponse
from app.schemas.supplier import SupplierCreate, SupplierUpdate
from app.services.ownership import OwnershipResolver, assert_role

logger = logging.getLogger(__name__)

_TAX_ID_TAKEN = "A supplier with this tax id already exists"
_TAX_ID = re.compile(r"^\d{14}$")


class SupplierService:
    def __init__(
        self,
        session: AsyncSession,
        *,
        users: ExistenceChecker | None = None,
        ownership: OwnershipResolver | None = None,
    ) -> None:
        self.suppliers = Repository(session, Supplier, conflict_message=_TAX_ID_TAKEN)
        self.users = users or Repository(session, User)
        self.ownership = ownership or OwnershipResolver(session)

    async def _ensure_tax_id_free(self, tax_id: str, exclude_id: uuid.UUID | None = None) -> None:
        criteria = [Supplier.tax_id == tax_id]
        if exclude_id is not None:
            criteria.append(Supplier.id != exclude_id)
        if await self.suppliers.find_one(*criteria) is not None:
            raise ConflictError(_TAX_ID_TAKEN)

    async def list_all(self) -> ServiceResponse[list[Supplier]]:
        return ServiceResponse("Suppliers retrieved", await self.suppliers.find_many())

    async def get(self, supplier_id: uuid.UUID) -> ServiceResponse[Supplier]:
        return ServiceResponse("Supplier retrieved", await self.ownership.get_supplier(supplier_id))

    async def by_tax_id(self, tax_id: str) -> ServiceResponse[Supplier]:
        tax_id = tax_id.strip()
        if not _TAX_ID.match(tax_id):
            raise ValidationError("Tax id must have exactly 14 digits")
        supplier = await self.suppliers.find_one(Supplier.tax_id == tax_id)
        if supplier is None:
            raise NotFoundError("Supplier not found")
        return ServiceResponse("Supplier retrieved", supplier)

    async def create(self, payload: SupplierCreate, caller: Caller) -> ServiceResponse[Supplier]:
        assert_role(caller, UserRole.SUPPLIER.value)
        owner_id = payload.user_id or caller.id
        if owner_id != caller.id and not caller.is_admin:
            raise ForbiddenError("You can only register suppliers for yourself")
        if not await self.users.exists(owner_id):
            raise NotFoundError("User not found")
        await self._ensure_tax_id_free(payload.tax_id)

        values = payload.model_dump(exclude={"user_id"})
        supplier = await self.suppliers.insert(Supplier(**values, user_id=owner_id))
        logger.info("Supplier %s created for user %s", supplier.id, owner_id)
        return ServiceResponse("Supplier created", supplier)

    async def update(
        self, supplier_id: uuid.UUID, payload: SupplierUpdate, caller: Caller
    ) -> ServiceResponse[Supplier]:
        supplier = await self.ownership.require_supplier_owner(supplier_id, caller)
        values = payload.model_dump(exclude_unset=True)
        values = {
            f: v for f, v in values.items() if v is not None or f in ("legal_name", "trade_name")
        }
        if "tax_id" in values and values["tax_id"] != supplier.tax_id:
            await self._ensure_tax_id_free(values["tax_id"], exclude_id=supplier.id)
        return ServiceResponse("Supplier updated", await self.suppliers.update(supplier, values))

    async def delete(self, supplier_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        supplier = await self.ownership.require_supplier_owner(supplier_id, caller)
        await self.suppliers.soft_delete(supplier)
        logger.info("Supplier %s deleted by %s", supplier.id, caller.id)
        return ServiceResponse("Supplier deleted")
