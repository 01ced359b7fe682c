"""API routes for promotional campaigns."""

import uuid

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_campaign_service
from app.auth import Caller, get_current_caller
from app.models.enums import CampaignStatus
from app.schemas.campaign import CampaignCreate, CampaignResponse, CampaignUpdate
from app.schemas.common import ApiResponse
from app.services import CampaignService

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=ApiResponse[list[CampaignResponse]])
async def list_campaigns(
    supplier_id: uuid.UUID | None = Query(None),
    status: CampaignStatus | None = Query(None),
    caller: Caller = Depends(get_current_caller),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.list_all(supplier_id, status.value if status else None)


@router.get("/{campaign_id}", response_model=ApiResponse[CampaignResponse])
async def get_campaign(
    campaign_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.get(campaign_id)


@router.post("", response_model=ApiResponse[CampaignResponse], status_code=201)
async def create_campaign(
    data: CampaignCreate,
    caller: Caller = Depends(get_current_caller),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.create(data, caller)


@router.patch("/{campaign_id}", response_model=ApiResponse[CampaignResponse])
async def update_campaign(
    campaign_id: uuid.UUID,
    data: CampaignUpdate,
    caller: Caller = Depends(get_current_caller),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.update(campaign_id, data, caller)


@router.delete("/{campaign_id}", response_model=ApiResponse[None])
async def delete_campaign(
    campaign_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.delete(campaign_id, caller)
