"""API routes for the product catalog."""

import uuid

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_product_service
from app.auth import Caller, get_current_caller
from app.schemas.common import ApiResponse
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=ApiResponse[list[ProductResponse]])
async def list_products(
    supplier_id: uuid.UUID | None = Query(None, description="Filter by supplier"),
    category: str | None = Query(None, description="Filter by category"),
    name: str | None = Query(None, description="Case-insensitive name search"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    caller: Caller = Depends(get_current_caller),
    service: ProductService = Depends(get_product_service),
):
    return await service.list_all(supplier_id, category, name, limit=limit, offset=offset)


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
async def get_product(
    product_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: ProductService = Depends(get_product_service),
):
    return await service.get(product_id)


@router.post("", response_model=ApiResponse[ProductResponse], status_code=201)
async def create_product(
    data: ProductCreate,
    caller: Caller = Depends(get_current_caller),
    service: ProductService = Depends(get_product_service),
):
    return await service.create(data, caller)


@router.patch("/{product_id}", response_model=ApiResponse[ProductResponse])
async def update_product(
    product_id: uuid.UUID,
    data: ProductUpdate,
    caller: Caller = Depends(get_current_caller),
    service: ProductService = Depends(get_product_service),
):
    return await service.update(product_id, data, caller)


@router.delete("/{product_id}", response_model=ApiResponse[None])
async def delete_product(
    product_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: ProductService = Depends(get_product_service),
):
    return await service.delete(product_id, caller)
