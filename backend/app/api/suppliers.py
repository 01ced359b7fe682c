"""API routes for suppliers."""

import uuid

from fastapi import APIRouter, Depends

from app.api.deps import get_supplier_service
from app.auth import Caller, get_current_caller
from app.schemas.common import ApiResponse
from app.schemas.supplier import SupplierCreate, SupplierResponse, SupplierUpdate
from app.services import SupplierService

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get("", response_model=ApiResponse[list[SupplierResponse]])
async def list_suppliers(
    caller: Caller = Depends(get_current_caller),
    service: SupplierService = Depends(get_supplier_service),
):
    return await service.list_all()


@router.get("/tax-id/{tax_id}", response_model=ApiResponse[SupplierResponse])
async def get_supplier_by_tax_id(
    tax_id: str,
    caller: Caller = Depends(get_current_caller),
    service: SupplierService = Depends(get_supplier_service),
):
    return await service.by_tax_id(tax_id)


@router.get("/{supplier_id}", response_model=ApiResponse[SupplierResponse])
async def get_supplier(
    supplier_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: SupplierService = Depends(get_supplier_service),
):
    return await service.get(supplier_id)


@router.post("", response_model=ApiResponse[SupplierResponse], status_code=201)
async def create_supplier(
    data: SupplierCreate,
    caller: Caller = Depends(get_current_caller),
    service: SupplierService = Depends(get_supplier_service),
):
    return await service.create(data, caller)


@router.patch("/{supplier_id}", response_model=ApiResponse[SupplierResponse])
async def update_supplier(
    supplier_id: uuid.UUID,
    data: SupplierUpdate,
    caller: Caller = Depends(get_current_caller),
    service: SupplierService = Depends(get_supplier_service),
):
    return await service.update(supplier_id, data, caller)


@router.delete("/{supplier_id}", response_model=ApiResponse[None])
async def delete_supplier(
    supplier_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: SupplierService = Depends(get_supplier_service),
):
    return await service.delete(supplier_id, caller)
