"""Pytest fixtures for marketplace backend tests."""

import uuid
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.auth import create_access_token, hash_password
from app.database import Base, get_db
from app.main import app
from app.models import (
    Address,
    CommercialCondition,
    Product,
    PromotionalCampaign,
    Store,
    StoreSupplier,
    Supplier,
    User,
)


# Use SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"

engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
test_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

PASSWORD = "Secret@123"


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_db():
    async with test_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


app.dependency_overrides[get_db] = override_get_db


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def db():
    async with test_session() as session:
        yield session


def auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(str(user.id), user.email, user.role)
    return {"Authorization": f"Bearer {token}"}


async def _make_user(db: AsyncSession, role: str, email: str) -> User:
    user = User(
        first_name="Test",
        last_name=role.title(),
        email=email,
        password_hash=hash_password(PASSWORD),
        role=role,
    )
    db.add(user)
    await db.commit()
    return user


# --- Users ---

@pytest_asyncio.fixture
async def admin(db: AsyncSession) -> User:
    return await _make_user(db, "admin", "admin@example.com")


@pytest_asyncio.fixture
async def store_owner(db: AsyncSession) -> User:
    return await _make_user(db, "store", "buyer@example.com")


@pytest_asyncio.fixture
async def other_store_owner(db: AsyncSession) -> User:
    return await _make_user(db, "store", "other.buyer@example.com")


@pytest_asyncio.fixture
async def supplier_owner(db: AsyncSession) -> User:
    return await _make_user(db, "supplier", "seller@example.com")


@pytest_asyncio.fixture
async def other_supplier_owner(db: AsyncSession) -> User:
    return await _make_user(db, "supplier", "other.seller@example.com")


# --- Marketplace entities ---

@pytest_asyncio.fixture
async def sample_address(db: AsyncSession, store_owner: User) -> Address:
    address = Address(
        state="SP",
        city="São Paulo",
        district="Centro",
        street="Rua Direita",
        number="100",
        postal_code="01002000",
        user_id=store_owner.id,
    )
    db.add(address)
    await db.commit()
    return address


@pytest_asyncio.fixture
async def sample_store(db: AsyncSession, store_owner: User, sample_address: Address) -> Store:
    store = Store(
        name="Mercado Central",
        tax_id="11222333000181",
        user_id=store_owner.id,
        address_id=sample_address.id,
    )
    db.add(store)
    await db.commit()
    return store


@pytest_asyncio.fixture
async def sample_supplier(db: AsyncSession, supplier_owner: User) -> Supplier:
    supplier = Supplier(
        tax_id="44555666000199",
        legal_name="Distribuidora Alfa Ltda",
        trade_name="Alfa",
        description="Wholesale groceries",
        user_id=supplier_owner.id,
    )
    db.add(supplier)
    await db.commit()
    return supplier


@pytest_asyncio.fixture
async def other_supplier(db: AsyncSession, other_supplier_owner: User) -> Supplier:
    supplier = Supplier(
        tax_id="77888999000155",
        legal_name="Beta Atacado SA",
        trade_name="Beta",
        description="Cleaning products",
        user_id=other_supplier_owner.id,
    )
    db.add(supplier)
    await db.commit()
    return supplier


@pytest_asyncio.fixture
async def sample_link(db: AsyncSession, sample_store: Store, sample_supplier: Supplier) -> StoreSupplier:
    link = StoreSupplier(store_id=sample_store.id, supplier_id=sample_supplier.id)
    db.add(link)
    await db.commit()
    return link


async def make_product(
    db: AsyncSession, supplier: Supplier, name: str, price: str, category: str = "Beverages"
) -> Product:
    product = Product(
        name=name,
        description=f"{name} - case of 12 units",
        unit_price=Decimal(price),
        stock_quantity=100,
        category=category,
        supplier_id=supplier.id,
    )
    db.add(product)
    await db.commit()
    return product


@pytest_asyncio.fixture
async def sample_product(db: AsyncSession, sample_supplier: Supplier) -> Product:
    return await make_product(db, sample_supplier, "Guaraná 2L", "40.00")


async def make_campaign(
    db: AsyncSession,
    supplier: Supplier,
    name: str,
    discount: str,
    min_value: str | None = None,
    min_quantity: int | None = None,
    status: str = "active",
) -> PromotionalCampaign:
    campaign = PromotionalCampaign(
        id=uuid.uuid4(),
        name=name,
        description="Seasonal promotion",
        min_value=Decimal(min_value) if min_value is not None else None,
        min_quantity=min_quantity,
        discount_percentage=Decimal(discount),
        status=status,
        supplier_id=supplier.id,
    )
    db.add(campaign)
    await db.commit()
    return campaign


@pytest_asyncio.fixture
async def sample_campaign(db: AsyncSession, sample_supplier: Supplier) -> PromotionalCampaign:
    return await make_campaign(db, sample_supplier, "Spring Sale", "10", min_value="100.00")


@pytest_asyncio.fixture
async def sample_condition(db: AsyncSession, sample_supplier: Supplier) -> CommercialCondition:
    condition = CommercialCondition(
        region_code="SP",
        cashback_percentage=Decimal("2.00"),
        extended_term_days=30,
        unit_price_variance=Decimal("0.00"),
        supplier_id=sample_supplier.id,
    )
    db.add(condition)
    await db.commit()
    return condition


@pytest_asyncio.fixture
async def product_factory(db: AsyncSession):
    async def _create(supplier: Supplier, name: str, price: str, category: str = "Beverages"):
        return await make_product(db, supplier, name, price, category)

    return _create


@pytest_asyncio.fixture
async def campaign_factory(db: AsyncSession):
    async def _create(supplier: Supplier, name: str, discount: str, **thresholds):
        return await make_campaign(db, supplier, name, discount, **thresholds)

    return _create


# --- Auth headers ---

@pytest_asyncio.fixture
async def admin_headers(admin: User) -> dict[str, str]:
    return auth_headers(admin)


@pytest_asyncio.fixture
async def store_headers(store_owner: User) -> dict[str, str]:
    return auth_headers(store_owner)


@pytest_asyncio.fixture
async def other_store_headers(other_store_owner: User) -> dict[str, str]:
    return auth_headers(other_store_owner)


@pytest_asyncio.fixture
async def supplier_headers(supplier_owner: User) -> dict[str, str]:
    return auth_headers(supplier_owner)


@pytest_asyncio.fixture
async def other_supplier_headers(other_supplier_owner: User) -> dict[str, str]:
    return auth_headers(other_supplier_owner)
