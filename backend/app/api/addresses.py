"""API routes for addresses."""

import uuid

from fastapi import APIRouter, Depends

from app.api.deps import get_address_service
from app.auth import Caller, get_current_caller
from app.schemas.address import AddressCreate, AddressResponse, AddressUpdate
from app.schemas.common import ApiResponse
from app.services import AddressService

router = APIRouter(prefix="/addresses", tags=["addresses"])


@router.get("", response_model=ApiResponse[list[AddressResponse]])
async def list_addresses(
    caller: Caller = Depends(get_current_caller),
    service: AddressService = Depends(get_address_service),
):
    return await service.list_all(caller)


@router.get("/postal-code/{postal_code}", response_model=ApiResponse[list[AddressResponse]])
async def addresses_by_postal_code(
    postal_code: str,
    caller: Caller = Depends(get_current_caller),
    service: AddressService = Depends(get_address_service),
):
    return await service.by_postal_code(postal_code)


@router.get("/{address_id}", response_model=ApiResponse[AddressResponse])
async def get_address(
    address_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: AddressService = Depends(get_address_service),
):
    return await service.get(address_id)


@router.post("", response_model=ApiResponse[AddressResponse], status_code=201)
async def create_address(
    data: AddressCreate,
    caller: Caller = Depends(get_current_caller),
    service: AddressService = Depends(get_address_service),
):
    return await service.create(data, caller)


@router.patch("/{address_id}", response_model=ApiResponse[AddressResponse])
async def update_address(
    address_id: uuid.UUID,
    data: AddressUpdate,
    caller: Caller = Depends(get_current_caller),
    service: AddressService = Depends(get_address_service),
):
    return await service.update(address_id, data, caller)


@router.delete("/{address_id}", response_model=ApiResponse[None])
async def delete_address(
    address_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: AddressService = Depends(get_address_service),
):
    return await service.delete(address_id, caller)
