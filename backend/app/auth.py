"""Password hashing, JWT creation/validation, and FastAPI auth dependencies."""

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.database import get_db
from app.errors import UnauthorizedError
from app.models import User
from app.models.enums import UserRole
from app.repository import Repository

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True)
class Caller:
    """The authenticated identity a request acts as."""

    id: uuid.UUID
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(user_id: str, email: str, role: str) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expire_hours)
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> uuid.UUID:
    """Return the user id carried by *token* or raise ``UnauthorizedError``."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except JWTError:
        raise UnauthorizedError("Invalid token")

    subject = payload.get("sub")
    if subject is None:
        raise UnauthorizedError("Invalid token")
    try:
        return uuid.UUID(subject)
    except ValueError:
        raise UnauthorizedError("Invalid token")


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Require a valid JWT and return the authenticated, non-deleted user."""
    if credentials is None:
        raise UnauthorizedError("Token not provided")

    user_id = decode_access_token(credentials.credentials)
    user = await Repository(db, User).get(user_id)
    if user is None:
        raise UnauthorizedError("User not found")
    return user


async def get_current_caller(user: User = Depends(get_current_user)) -> Caller:
    # Role comes from the stored user, not from the token claim.
    return Caller(id=user.id, role=user.role)
