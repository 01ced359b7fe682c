"""Promotional campaigns and the discount they grant on orders.

A campaign belongs to a supplier and discounts an order's total when the
order reaches its minimum value and/or minimum quantity. When several
campaigns qualify the best one wins: highest discount percentage, then
the oldest, then the lowest id.
"""

import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import ConflictError, NotFoundError
from app.models import PromotionalCampaign
from app.models.enums import CampaignStatus, UserRole
from app.repository import Repository
from app.schemas.campaign import CampaignCreate, CampaignUpdate
from app.schemas.common import ServiceResponse
from app.services.money import HUNDRED, ZERO, to_money
from app.services.ownership import OwnershipResolver, assert_role

logger = logging.getLogger(__name__)

_DUPLICATE_NAME = "A campaign with this name already exists"


def is_active(campaign: PromotionalCampaign | None) -> bool:
    return (
        campaign is not None
        and campaign.deleted_at is None
        and campaign.status == CampaignStatus.ACTIVE.value
    )


def is_eligible(campaign: PromotionalCampaign, value: Decimal, quantity: int) -> bool:
    if not is_active(campaign):
        return False
    if campaign.min_value is not None and value < campaign.min_value:
        return False
    if campaign.min_quantity is not None and quantity < campaign.min_quantity:
        return False
    return True


def _as_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; all stored values are UTC.
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


def _precedence(campaign: PromotionalCampaign) -> tuple[Decimal, datetime, str]:
    return (-Decimal(campaign.discount_percentage), _as_utc(campaign.created_at), str(campaign.id))


def best_campaign(
    campaigns: Iterable[PromotionalCampaign], value: Decimal, quantity: int
) -> PromotionalCampaign | None:
    eligible = [c for c in campaigns if is_eligible(c, value, quantity)]
    if not eligible:
        return None
    return min(eligible, key=_precedence)


def apply_discount(
    campaign: PromotionalCampaign | None, value: Decimal, quantity: int | None = None
) -> Decimal:
    """Return *value* reduced by the campaign's percentage, never below zero.

    Inactive, expired or deleted campaigns (and ``None``) leave the value
    untouched, as does a campaign whose minimum value is not reached. The
    minimum quantity is only checked when *quantity* is given.
    """
    if not is_active(campaign):
        return value
    value = Decimal(value)
    if campaign.min_value is not None and value < campaign.min_value:
        return value
    if quantity is not None and campaign.min_quantity is not None and quantity < campaign.min_quantity:
        return value
    discounted = to_money(value - value * Decimal(campaign.discount_percentage) / HUNDRED)
    return max(discounted, ZERO)


class CampaignDiscountEvaluator:
    def __init__(self, session: AsyncSession) -> None:
        self.campaigns = Repository(session, PromotionalCampaign)

    async def select_applicable_campaign(
        self, supplier_id: uuid.UUID, value: Decimal, quantity: int
    ) -> PromotionalCampaign | None:
        candidates = await self.campaigns.find_many(
            PromotionalCampaign.supplier_id == supplier_id,
            PromotionalCampaign.status == CampaignStatus.ACTIVE.value,
        )
        return best_campaign(candidates, value, quantity)


class CampaignService:
    def __init__(self, session: AsyncSession, ownership: OwnershipResolver | None = None) -> None:
        self.campaigns = Repository(session, PromotionalCampaign, conflict_message=_DUPLICATE_NAME)
        self.ownership = ownership or OwnershipResolver(session)

    async def _load(self, campaign_id: uuid.UUID) -> PromotionalCampaign:
        campaign = await self.campaigns.get(campaign_id)
        if campaign is None:
            raise NotFoundError("Campaign not found")
        return campaign

    async def _ensure_name_free(self, name: str, exclude_id: uuid.UUID | None = None) -> None:
        criteria = [PromotionalCampaign.name == name]
        if exclude_id is not None:
            criteria.append(PromotionalCampaign.id != exclude_id)
        if await self.campaigns.find_one(*criteria) is not None:
            raise ConflictError(_DUPLICATE_NAME)

    async def list_all(
        self, supplier_id: uuid.UUID | None = None, status: str | None = None
    ) -> ServiceResponse[list[PromotionalCampaign]]:
        criteria = []
        if supplier_id is not None:
            criteria.append(PromotionalCampaign.supplier_id == supplier_id)
        if status is not None:
            criteria.append(PromotionalCampaign.status == status)
        campaigns = await self.campaigns.find_many(*criteria)
        return ServiceResponse("Campaigns retrieved", campaigns)

    async def get(self, campaign_id: uuid.UUID) -> ServiceResponse[PromotionalCampaign]:
        return ServiceResponse("Campaign retrieved", await self._load(campaign_id))

    async def create(self, payload: CampaignCreate, caller: Caller) -> ServiceResponse[PromotionalCampaign]:
        assert_role(caller, UserRole.SUPPLIER.value)
        await self.ownership.require_supplier_owner(payload.supplier_id, caller)
        await self._ensure_name_free(payload.name)

        campaign = await self.campaigns.insert(PromotionalCampaign(**payload.model_dump()))
        logger.info(
            "Campaign %s (%s%%) created for supplier %s",
            campaign.id, campaign.discount_percentage, campaign.supplier_id,
        )
        return ServiceResponse("Campaign created", campaign)

    async def update(
        self, campaign_id: uuid.UUID, payload: CampaignUpdate, caller: Caller
    ) -> ServiceResponse[PromotionalCampaign]:
        campaign = await self._load(campaign_id)
        await self.ownership.require_supplier_owner(campaign.supplier_id, caller)

        values = payload.model_dump(exclude_unset=True)
        # Only the threshold and description fields may be cleared.
        values = {
            field: value
            for field, value in values.items()
            if value is not None or field in ("description", "min_value", "min_quantity")
        }
        if "name" in values and values["name"] != campaign.name:
            await self._ensure_name_free(values["name"], exclude_id=campaign.id)

        campaign = await self.campaigns.update(campaign, values)
        return ServiceResponse("Campaign updated", campaign)

    async def delete(self, campaign_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        campaign = await self._load(campaign_id)
        await self.ownership.require_supplier_owner(campaign.supplier_id, caller)
        await self.campaigns.soft_delete(campaign)
        logger.info("Campaign %s deleted by %s", campaign.id, caller.id)
        return ServiceResponse("Campaign deleted")
