"""User accounts: registration, login and self-service profile changes."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller, create_access_token, hash_password, verify_password
from app.errors import ConflictError, ForbiddenError, NotFoundError, UnauthorizedError
from app.models import User
from app.models.enums import UserRole
from app.repository import Repository
from app.schemas.common import ServiceResponse
from app.schemas.user import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.services.ownership import assert_ownership, assert_role

logger = logging.getLogger(__name__)

_EMAIL_TAKEN = "Email already registered"


class UserService:
    def __init__(self, session: AsyncSession) -> None:
        self.users = Repository(session, User, conflict_message=_EMAIL_TAKEN)

    async def _load(self, user_id: uuid.UUID) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def _issue_token(self, user: User) -> AuthResponse:
        token = create_access_token(str(user.id), user.email, user.role)
        return AuthResponse(access_token=token, user=UserResponse.model_validate(user))

    async def register(self, payload: RegisterRequest) -> ServiceResponse[AuthResponse]:
        if payload.role == UserRole.ADMIN.value:
            raise ForbiddenError("Admin accounts cannot be self-registered")
        if await self.users.find_one(User.email == payload.email) is not None:
            raise ConflictError(_EMAIL_TAKEN)

        user = await self.users.insert(
            User(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                password_hash=hash_password(payload.password),
                phone=payload.phone,
                role=payload.role,
            )
        )
        logger.info("User registered: %s (%s)", user.id, user.role)
        return ServiceResponse("User registered", self._issue_token(user))

    async def login(self, payload: LoginRequest) -> ServiceResponse[AuthResponse]:
        user = await self.users.find_one(User.email == payload.email.lower())
        if user is None or not verify_password(payload.password, user.password_hash):
            logger.warning("Failed login for %s", payload.email)
            raise UnauthorizedError("Invalid email or password")
        return ServiceResponse("Login successful", self._issue_token(user))

    async def list_all(self, caller: Caller) -> ServiceResponse[list[User]]:
        assert_role(caller)
        return ServiceResponse("Users retrieved", await self.users.find_many())

    async def get(self, user_id: uuid.UUID, caller: Caller) -> ServiceResponse[User]:
        user = await self._load(user_id)
        assert_ownership(user.id, caller)
        return ServiceResponse("User retrieved", user)

    async def update(
        self, user_id: uuid.UUID, payload: UserUpdateRequest, caller: Caller
    ) -> ServiceResponse[User]:
        user = await self._load(user_id)
        assert_ownership(user.id, caller)

        values = payload.model_dump(exclude_unset=True)
        values = {f: v for f, v in values.items() if v is not None or f == "phone"}
        if "role" in values and values["role"] != user.role and not caller.is_admin:
            raise ForbiddenError("Only an admin can change roles")

        user = await self.users.update(user, values)
        return ServiceResponse("User updated", user)

    async def delete(self, user_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        user = await self._load(user_id)
        assert_ownership(user.id, caller)
        await self.users.soft_delete(user)
        logger.info("User %s deleted by %s", user.id, caller.id)
        return ServiceResponse("User deleted")
