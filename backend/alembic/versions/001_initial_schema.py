"""Initial marketplace schema

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LIVE = sa.text("deleted_at IS NULL")


def _entity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def _fk(name: str, target: str, nullable: bool = False) -> sa.Column:
    return sa.Column(name, postgresql.UUID(as_uuid=True), sa.ForeignKey(target), nullable=nullable)


def upgrade() -> None:
    # Users
    op.create_table(
        "users",
        *_entity_columns(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(128), nullable=False),
        sa.Column("phone", sa.String(20)),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
    )
    op.create_index("uq_users_email_live", "users", ["email"], unique=True, postgresql_where=LIVE)

    # Addresses
    op.create_table(
        "addresses",
        *_entity_columns(),
        sa.Column("state", sa.String(2), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("district", sa.String(100), nullable=False),
        sa.Column("street", sa.String(200), nullable=False),
        sa.Column("number", sa.String(10), nullable=False),
        sa.Column("complement", sa.String(100)),
        sa.Column("postal_code", sa.String(8), nullable=False),
        _fk("user_id", "users.id", nullable=True),
    )
    op.create_index("idx_addresses_postal_code", "addresses", ["postal_code"])

    # Suppliers
    op.create_table(
        "suppliers",
        *_entity_columns(),
        sa.Column("tax_id", sa.String(14), nullable=False),
        sa.Column("legal_name", sa.String(150)),
        sa.Column("trade_name", sa.String(100)),
        sa.Column("description", sa.Text(), nullable=False),
        _fk("user_id", "users.id"),
    )
    op.create_index("uq_suppliers_tax_id_live", "suppliers", ["tax_id"], unique=True, postgresql_where=LIVE)
    op.create_index("idx_suppliers_user_id", "suppliers", ["user_id"])

    # Stores
    op.create_table(
        "stores",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("tax_id", sa.String(14), nullable=False),
        _fk("user_id", "users.id"),
        _fk("address_id", "addresses.id", nullable=True),
    )
    op.create_index("uq_stores_tax_id_live", "stores", ["tax_id"], unique=True, postgresql_where=LIVE)
    op.create_index("idx_stores_user_id", "stores", ["user_id"])

    # Store <-> supplier links
    op.create_table(
        "store_suppliers",
        *_entity_columns(),
        _fk("store_id", "stores.id"),
        _fk("supplier_id", "suppliers.id"),
    )
    op.create_index(
        "uq_store_suppliers_pair_live",
        "store_suppliers",
        ["store_id", "supplier_id"],
        unique=True,
        postgresql_where=LIVE,
    )

    # Products
    op.create_table(
        "products",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("image_url", sa.Text()),
        _fk("supplier_id", "suppliers.id"),
    )
    op.create_index("idx_products_supplier_id", "products", ["supplier_id"])
    op.create_index("idx_products_category", "products", ["category"])

    # Commercial conditions
    op.create_table(
        "commercial_conditions",
        *_entity_columns(),
        sa.Column("region_code", sa.String(2), nullable=False),
        sa.Column("cashback_percentage", sa.Numeric(5, 2), nullable=False, server_default="0"),
        sa.Column("extended_term_days", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unit_price_variance", sa.Numeric(12, 2), nullable=False, server_default="0"),
        _fk("supplier_id", "suppliers.id"),
    )
    op.create_index(
        "uq_commercial_conditions_region_live",
        "commercial_conditions",
        ["supplier_id", "region_code"],
        unique=True,
        postgresql_where=LIVE,
    )

    # Promotional campaigns
    op.create_table(
        "promotional_campaigns",
        *_entity_columns(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("min_value", sa.Numeric(12, 2)),
        sa.Column("min_quantity", sa.Integer()),
        sa.Column("discount_percentage", sa.Numeric(5, 2), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        _fk("supplier_id", "suppliers.id"),
    )
    op.create_index(
        "uq_promotional_campaigns_name_live",
        "promotional_campaigns",
        ["name"],
        unique=True,
        postgresql_where=LIVE,
    )
    op.create_index("idx_campaigns_supplier_status", "promotional_campaigns", ["supplier_id", "status"])

    # Orders
    op.create_table(
        "orders",
        *_entity_columns(),
        sa.Column("description", sa.Text()),
        _fk("user_id", "users.id"),
        _fk("store_id", "stores.id"),
        _fk("supplier_id", "suppliers.id"),
        _fk("campaign_id", "promotional_campaigns.id", nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column("delivery_days", sa.Integer(), nullable=False),
        sa.Column("subtotal_value", sa.Numeric(12, 2), nullable=False),
        sa.Column("discount_value", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("total_value", sa.Numeric(12, 2), nullable=False),
        sa.Column("cashback_value", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("extended_term_days", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("region_code", sa.String(2)),
        sa.Column("shipped_at", sa.DateTime(timezone=True)),
        sa.Column("delivered_at", sa.DateTime(timezone=True)),
    )
    op.create_index("idx_orders_store_id", "orders", ["store_id"])
    op.create_index("idx_orders_supplier_id", "orders", ["supplier_id"])
    op.create_index("idx_orders_user_id", "orders", ["user_id"])
    op.create_index("idx_orders_status", "orders", ["status"])

    # Order items
    op.create_table(
        "order_items",
        *_entity_columns(),
        _fk("order_id", "orders.id"),
        _fk("product_id", "products.id"),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("subtotal", sa.Numeric(12, 2), nullable=False),
    )
    op.create_index("idx_order_items_order_id", "order_items", ["order_id"])


def downgrade() -> None:
    for table in (
        "order_items",
        "orders",
        "promotional_campaigns",
        "commercial_conditions",
        "products",
        "store_suppliers",
        "stores",
        "suppliers",
        "addresses",
        "users",
    ):
        op.drop_table(table)
