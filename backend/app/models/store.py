"""Store (buyer) model and its link to suppliers."""

import uuid

from sqlalchemy import ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, EntityMixin, unique_while_live


class Store(EntityMixin, Base):
    __tablename__ = "stores"
    __table_args__ = (unique_while_live("uq_stores_tax_id_live", "tax_id"),)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tax_id: Mapped[str] = mapped_column(String(14), nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )
    address_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("addresses.id"), nullable=True
    )


class StoreSupplier(EntityMixin, Base):
    __tablename__ = "store_suppliers"
    __table_args__ = (
        unique_while_live("uq_store_suppliers_pair_live", "store_id", "supplier_id"),
    )

    store_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stores.id"), nullable=False, index=True
    )
    supplier_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("suppliers.id"), nullable=False, index=True
    )
