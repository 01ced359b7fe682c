"""Per-request service construction.

Every factory shares the request's ``AsyncSession`` through ``get_db``,
so the caller lookup and the service run in one transaction.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.services import (
    AddressService,
    CampaignService,
    CommercialConditionService,
    OrderService,
    ProductService,
    StoreService,
    StoreSupplierService,
    SupplierService,
    UserService,
)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_address_service(db: AsyncSession = Depends(get_db)) -> AddressService:
    return AddressService(db)


def get_supplier_service(db: AsyncSession = Depends(get_db)) -> SupplierService:
    return SupplierService(db)


def get_store_service(db: AsyncSession = Depends(get_db)) -> StoreService:
    return StoreService(db)


def get_store_supplier_service(db: AsyncSession = Depends(get_db)) -> StoreSupplierService:
    return StoreSupplierService(db)


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_condition_service(db: AsyncSession = Depends(get_db)) -> CommercialConditionService:
    return CommercialConditionService(db)


def get_campaign_service(db: AsyncSession = Depends(get_db)) -> CampaignService:
    return CampaignService(db)


def get_order_service(db: AsyncSession = Depends(get_db)) -> OrderService:
    return OrderService(db)
