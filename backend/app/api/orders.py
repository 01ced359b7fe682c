"""API routes for orders."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_order_service
from app.auth import Caller, get_current_caller
from app.models.enums import OrderStatus
from app.schemas.common import ApiResponse
from app.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate, OrderUpdate
from app.services import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=ApiResponse[list[OrderResponse]])
async def list_orders(
    store_id: uuid.UUID | None = Query(None),
    supplier_id: uuid.UUID | None = Query(None),
    status: OrderStatus | None = Query(None),
    date_from: date | None = Query(None, description="Created on or after (YYYY-MM-DD)"),
    date_to: date | None = Query(None, description="Created on or before (YYYY-MM-DD)"),
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.list_all(
        caller,
        store_id=store_id,
        supplier_id=supplier_id,
        status=status.value if status else None,
        date_from=date_from,
        date_to=date_to,
    )


@router.get("/mine", response_model=ApiResponse[list[OrderResponse]])
async def list_my_orders(
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.list_mine(caller)


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse])
async def get_order(
    order_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.get(order_id, caller)


@router.post("", response_model=ApiResponse[OrderResponse], status_code=201)
async def create_order(
    data: OrderCreate,
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.create(data, caller)


@router.patch("/{order_id}", response_model=ApiResponse[OrderResponse])
async def update_order(
    order_id: uuid.UUID,
    data: OrderUpdate,
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.update(order_id, data, caller)


@router.patch("/{order_id}/status", response_model=ApiResponse[OrderResponse])
async def change_order_status(
    order_id: uuid.UUID,
    data: OrderStatusUpdate,
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.change_status(order_id, data.status, caller)


@router.delete("/{order_id}", response_model=ApiResponse[None])
async def delete_order(
    order_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: OrderService = Depends(get_order_service),
):
    return await service.delete(order_id, caller)
