"""Supplier catalog."""

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import Caller
from app.errors import NotFoundError
from app.models import Product
from app.models.enums import UserRole
from app.repository import Repository
from app.schemas.common import ServiceResponse
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.ownership import OwnershipResolver, assert_role

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, session: AsyncSession, ownership: OwnershipResolver | None = None) -> None:
        self.products = Repository(session, Product)
        self.ownership = ownership or OwnershipResolver(session)

    async def _load(self, product_id: uuid.UUID) -> Product:
        product = await self.products.get(product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def list_all(
        self,
        supplier_id: uuid.UUID | None = None,
        category: str | None = None,
        name: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> ServiceResponse[list[Product]]:
        criteria = []
        if supplier_id is not None:
            criteria.append(Product.supplier_id == supplier_id)
        if category:
            criteria.append(func.lower(Product.category) == category.strip().lower())
        if name:
            criteria.append(Product.name.ilike(f"%{name.strip()}%"))
        products = await self.products.find_many(
            *criteria, order_by=Product.name, limit=limit, offset=offset
        )
        return ServiceResponse("Products retrieved", products)

    async def get(self, product_id: uuid.UUID) -> ServiceResponse[Product]:
        return ServiceResponse("Product retrieved", await self._load(product_id))

    async def create(self, payload: ProductCreate, caller: Caller) -> ServiceResponse[Product]:
        assert_role(caller, UserRole.SUPPLIER.value)
        await self.ownership.require_supplier_owner(payload.supplier_id, caller)
        product = await self.products.insert(Product(**payload.model_dump()))
        logger.info("Product %s created for supplier %s", product.id, product.supplier_id)
        return ServiceResponse("Product created", product)

    async def update(
        self, product_id: uuid.UUID, payload: ProductUpdate, caller: Caller
    ) -> ServiceResponse[Product]:
        product = await self._load(product_id)
        await self.ownership.require_supplier_owner(product.supplier_id, caller)
        values = payload.model_dump(exclude_unset=True)
        values = {f: v for f, v in values.items() if v is not None or f == "image_url"}
        return ServiceResponse("Product updated", await self.products.update(product, values))

    async def delete(self, product_id: uuid.UUID, caller: Caller) -> ServiceResponse[None]:
        product = await self._load(product_id)
        await self.ownership.require_supplier_owner(product.supplier_id, caller)
        await self.products.soft_delete(product)
        logger.info("Product %s deleted by %s", product.id, caller.id)
        return ServiceResponse("Product deleted")
