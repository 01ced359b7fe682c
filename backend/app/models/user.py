"""User account model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, EntityMixin, unique_while_live
from app.models.enums import UserRole


class User(EntityMixin, Base):
    __tablename__ = "users"
    __table_args__ = (unique_while_live("uq_users_email_live", "email"),)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20))
    role: Mapped[str] = mapped_column(String(20), default=UserRole.USER.value, nullable=False)
