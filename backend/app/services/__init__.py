"""Application services."""

from app.services.addresses import AddressService
from app.services.campaigns import CampaignDiscountEvaluator, CampaignService
from app.services.commercial_conditions import CommercialConditionService, CommercialTermsResolver
from app.services.orders import OrderService
from app.services.ownership import OwnershipResolver
from app.services.pricing import OrderPricingEngine
from app.services.products import ProductService
from app.services.store_suppliers import StoreSupplierService
from app.services.stores import StoreService
from app.services.suppliers import SupplierService
from app.services.users import UserService

__all__ = [
    "AddressService",
    "CampaignDiscountEvaluator",
    "CampaignService",
    "CommercialConditionService",
    "CommercialTermsResolver",
    "OrderPricingEngine",
    "OrderService",
    "OwnershipResolver",
    "ProductService",
    "StoreService",
    "StoreSupplierService",
    "SupplierService",
    "UserService",
]
