"""Supplier commercial terms per region."""

import uuid
from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, EntityMixin, unique_while_live


class CommercialCondition(EntityMixin, Base):
    __tablename__ = "commercial_conditions"
    __table_args__ = (
        unique_while_live("uq_commercial_conditions_region_live", "supplier_id", "region_code"),
    )

    region_code: Mapped[str] = mapped_column(String(2), nullable=False)
    cashback_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=0, nullable=False)
    extended_term_days: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    unit_price_variance: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=0, nullable=False)
    supplier_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("suppliers.id"), nullable=False, index=True
    )
