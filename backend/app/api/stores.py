"""API routes for stores."""

import uuid

from fastapi import APIRouter, Depends

from app.api.deps import get_store_service
from app.auth import Caller, get_current_caller
from app.schemas.common import ApiResponse
from app.schemas.store import StoreCreate, StoreResponse, StoreUpdate
from app.services import StoreService

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", response_model=ApiResponse[list[StoreResponse]])
async def list_stores(
    caller: Caller = Depends(get_current_caller),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_all()


@router.get("/mine", response_model=ApiResponse[list[StoreResponse]])
async def list_my_stores(
    caller: Caller = Depends(get_current_caller),
    service: StoreService = Depends(get_store_service),
):
    return await service.list_mine(caller)


@router.get("/{store_id}", response_model=ApiResponse[StoreResponse])
async def get_store(
    store_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: StoreService = Depends(get_store_service),
):
    return await service.get(store_id)


@router.post("", response_model=ApiResponse[StoreResponse], status_code=201)
async def create_store(
    data: StoreCreate,
    caller: Caller = Depends(get_current_caller),
    service: StoreService = Depends(get_store_service),
):
    return await service.create(data, caller)


@router.patch("/{store_id}", response_model=ApiResponse[StoreResponse])
async def update_store(
    store_id: uuid.UUID,
    data: StoreUpdate,
    caller: Caller = Depends(get_current_caller),
    service: StoreService = Depends(get_store_service),
):
    return await service.update(store_id, data, caller)


@router.delete("/{store_id}", response_model=ApiResponse[None])
async def delete_store(
    store_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: StoreService = Depends(get_store_service),
):
    return await service.delete(store_id, caller)
