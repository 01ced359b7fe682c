"""Auth API routes: register, login, me."""

from fastapi import APIRouter, Depends

from app.api.deps import get_user_service
from app.auth import get_current_user
from app.models import User
from app.schemas.common import ApiResponse, ServiceResponse
from app.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from app.services import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[AuthResponse], status_code=201)
async def register(data: RegisterRequest, service: UserService = Depends(get_user_service)):
    return await service.register(data)


@router.post("/login", response_model=ApiResponse[AuthResponse])
async def login(data: LoginRequest, service: UserService = Depends(get_user_service)):
    return await service.login(data)


@router.get("/me", response_model=ApiResponse[UserResponse])
async def me(user: User = Depends(get_current_user)):
    return ServiceResponse("Authenticated user", user)
