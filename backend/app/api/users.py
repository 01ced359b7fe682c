"""User account routes (JWT-protected)."""

import uuid

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.auth import Caller, get_current_caller
from app.schemas.common import ApiResponse
from app.schemas.user import UserResponse, UserUpdateRequest
from app.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ApiResponse[list[UserResponse]])
async def list_users(
    caller: Caller = Depends(get_current_caller),
    service: UserService = Depends(get_user_service),
):
    return await service.list_all(caller)


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: UserService = Depends(get_user_service),
):
    return await service.get(user_id, caller)


@router.patch("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_id: uuid.UUID,
    data: UserUpdateRequest,
    caller: Caller = Depends(get_current_caller),
    service: UserService = Depends(get_user_service),
):
    return await service.update(user_id, data, caller)


@router.delete("/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: uuid.UUID,
    caller: Caller = Depends(get_current_caller),
    service: UserService = Depends(get_user_service),
):
    return await service.delete(user_id, caller)
