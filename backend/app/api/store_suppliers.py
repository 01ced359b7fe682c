"""API routes for store-supplier links."""

import uuid

from fastapi import APIRouter, Depends

from app.api.deps import get_store_supplier_service
from app.auth import Caller, get_current_caller
from app.schemas.common import ApiResponse
from app.schemas.store import StoreResponse, StoreSupplierCreate, StoreSupplierResponse
from app.schemas.supplier import SupplierResponse
from app.services import StoreSupplierService

router = APIRouter(prefix="/store-suppliers", tags=["store-suppliers"])


@router.get("", response_model=ApiResponse[list[StoreSupplierResponse]])
async def list_links(
    caller: Caller = Depends(get_current_caller),
    service: StoreSupplierService = Depends(get_store_supplier_service),
):
    return await service.list_all(caller)


@router.get("/stores/{store_id}/suppliers", response_model=ApiResponse[list[SupplierResponse]])
async def suppliers_of_store(
    store_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: StoreSupplierService = Depends(get_store_supplier_service),
):
    return await service.suppliers_of_store(store_id)


@router.get("/suppliers/{supplier_id}/stores", response_model=ApiResponse[list[StoreResponse]])
async def stores_of_supplier(
    supplier_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: StoreSupplierService = Depends(get_store_supplier_service),
):
    return await service.stores_of_supplier(supplier_id)


@router.post("", response_model=ApiResponse[StoreSupplierResponse], status_code=201)
async def link_store_to_supplier(
    data: StoreSupplierCreate,
    caller: Caller = Depends(get_current_caller),
    service: StoreSupplierService = Depends(get_store_supplier_service),
):
    return await service.create(data, caller)


@router.delete("/{store_id}/{supplier_id}", response_model=ApiResponse[None])
async def unlink_store_from_supplier(
    store_id: uuid.UUID,
    supplier_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: StoreSupplierService = Depends(get_store_supplier_service),
):
    return await service.delete(store_id, supplier_id, caller)
