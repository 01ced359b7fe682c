"""Per-region commercial terms offered by suppliers.

A supplier has at most one live condition per region. The resolver is
what order pricing consults; a missing condition is not an error, the
order simply gets no variance, cashback or extended term.
"""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ConflictError, NotFoundError, ValidationError
from app.models import CommercialCondition
from app.models.enums import VALID_REGION_CODES, UserRole
from app.repository import Repository
from app.schemas.commercial_condition import CommercialConditionCreate, CommercialConditionUpdate
from app.schemas.common import ServiceResponse
from app.services.ownership import OwnershipResolver, assert_role

logger = logging.getLogger(__name__)

_DUPLICATE_MESSAGE = "A commercial condition already exists for this supplier and region"


def normalize_region(region_code: str) -> str:
    code = (region_code or "").strip().upper()
    if code not in VALID_REGION_CODES:
        raise ValidationError(f"Invalid region code: {region_code!r}")
    return code


class CommercialTermsResolver:
    def __init__(self, session: AsyncSession) -> None:
        self.conditions = Repository(session, CommercialCondition)

    async def resolve(self, supplier_id: uuid.UUID, region_code: str) -> CommercialCondition | None:
        """Return the live condition for (supplier, region), or ``None``."""
        code = normalize_region(region_code)
        return await self.conditions.find_one(
            CommercialCondition.supplier_id == supplier_id,
            CommercialCondition.region_code == code,
        )


class CommercialConditionService:
    def __init__(self, session: AsyncSession, ownership: OwnershipResolver | None = None) -> None:
        self.conditions = Repository(session, CommercialCondition, conflict_message=_DUPLICATE_MESSAGE)
        self.ownership = ownership or OwnershipResolver(session)
        self.resolver = CommercialTermsResolver(session)

    async def _load(self, condition_id: uuid.UUID) -> CommercialCondition:
        condition = await self.conditions.get(condition_id)
        if condition is None:
            raise NotFoundError("Commercial condition not found")
        return condition

    async def list_all(
        self, caller: Caller, supplier_id: uuid.UUID | None = None
    ) -> ServiceResponse[list[CommercialCondition]]:
        criteria = []
        if supplier_id is not None:
            criteria.append(CommercialCondition.supplier_id == supplier_id)
        if not caller.is_admin:
            owned = await self.ownership.supplier_ids_for(caller)
            criteria.append(CommercialCondition.supplier_id.in_(owned))
        conditions = await self.conditions.find_many(*criteria)
        return ServiceResponse("Commercial conditions retrieved", conditions)

    async def get(self, condition_id: uuid.UUID, caller: Caller) -> ServiceResponse[CommercialCondition]:
        condition = await self._load(condition_id)
        await self.ownership.require_supplier_owner(condition.supplier_id, caller)
        return ServiceResponse("Commercial condition retrieved", condition)

    async def resolve(
        self, supplier_id: uuid.UUID, region_code: str
    ) -> ServiceResponse[CommercialCondition]:
        await self.ownership.get_supplier(supplier_id)
        condition = await self.resolver.resolve(supplier_id, region_code)
        if condition is None:
            return ServiceResponse("No commercial condition for this region")
        return ServiceResponse("Commercial condition retrieved", condition)

    async def create(
        self, payload: CommercialConditionCreate, caller: Caller
    ) -> ServiceResponse[CommercialCondition]:
        assert_role(caller, UserRole.SUPPLIER.value)
        region = normalize_region(payload.region_code)
        await self.ownership.require_supplier_owner(payload.supplier_id, caller)

        if await self.resolver.resolve(payload.supplier_id, region) is not None:
            raise ConflictError(_DUPLICATE_MESSAGE)

        condition = await self.conditions.insert(
            CommercialCondition(
                region_code=region,
                cashback_percentage=payload.cashback_percentage,
                extended_term_days=payload.extended_term_days,
                unit_price_variance=payload.unit_price_variance,
                supplier_id=payload.supplier_id,
            )
        )
        logger.info(
            "Commercial condition %s created for supplier %s in %s",
            condition.id, condition.supplier_id, region,
        )
        return ServiceResponse("Commercial condition created", condition)

    async def update(
        self, condition_id: uuid.UUID, payload: CommercialConditionUpdate, caller: Caller
    ) -> ServiceResponse[CommercialCondition]:
        condition = await self._load(condition_id)
        await self.ownership.require_supplier_owner(condition.supplier_id, caller)
        values = payload.model_dump(exclude_unset=True, exclude_none=True)
        condition = await self.conditions.update(condition, values)
        return ServiceResponse("Commercial condition updated", condition)

    async def delete(self, condition_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        condition = await self._load(condition_id)
        await self.ownership.require_supplier_owner(condition.supplier_id, caller)
        await self.conditions.soft_delete(condition)
        logger.info("Commercial condition %s deleted by %s", condition.id, caller.id)
        return ServiceResponse("Commercial condition deleted")
