"""API routes for supplier commercial conditions."""

import uuid

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_condition_service
from app.auth import Caller, get_current_caller
from app.schemas.commercial_condition import (
    CommercialConditionCreate,
    CommercialConditionResponse,
    CommercialConditionUpdate,
)
from app.schemas.common import ApiResponse
from app.services import CommercialConditionService

router = APIRouter(prefix="/commercial-conditions", tags=["commercial-conditions"])


@router.get("", response_model=ApiResponse[list[CommercialConditionResponse]])
async def list_conditions(
    supplier_id: uuid.UUID | None = Query(None),
    caller: Caller = Depends(get_current_caller),
    service: CommercialConditionService = Depends(get_condition_service),
):
    return await service.list_all(caller, supplier_id)


@router.get("/resolve", response_model=ApiResponse[CommercialConditionResponse])
async def resolve_condition(
    supplier_id: uuid.UUID,
    region: str = Query(..., min_length=2, max_length=2),
    caller: Caller = Depends(get_current_caller),
    service: CommercialConditionService = Depends(get_condition_service),
):
    return await service.resolve(supplier_id, region)


@router.get("/{condition_id}", response_model=ApiResponse[CommercialConditionResponse])
async def get_condition(
    condition_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: CommercialConditionService = Depends(get_condition_service),
):
    return await service.get(condition_id, caller)


@router.post("", response_model=ApiResponse[CommercialConditionResponse], status_code=201)
async def create_condition(
    data: CommercialConditionCreate,
    caller: Caller = Depends(get_current_caller),
    service: CommercialConditionService = Depends(get_condition_service),
):
    return await service.create(data, caller)


@router.patch("/{condition_id}", response_model=ApiResponse[CommercialConditionResponse])
async def update_condition(
    condition_id: uuid.UUID,
    data: CommercialConditionUpdate,
    caller: Caller = Depends(get_current_caller),
    service: CommercialConditionService = Depends(get_condition_service),
):
    return await service.update(condition_id, data, caller)


@router.delete("/{condition_id}", response_model=ApiResponse[None])
async def delete_condition(
    condition_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: CommercialConditionService = Depends(get_condition_service),
):
    return await service.delete(condition_id, caller)
