"""Supplier model."""

import uuid

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, EntityMixin, unique_while_live


class Supplier(EntityMixin, Base):
    __tablename__ = "suppliers"
    __table_args__ = (unique_while_live("uq_suppliers_tax_id_live", "tax_id"),)

    tax_id: Mapped[str] = mapped_column(String(14), nullable=False)
    legal_name: Mapped[str | None] = mapped_column(String(150))
    trade_name: Mapped[str | None] = mapped_column(String(100))
    description: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )
