"""SQLAlchemy models."""

from app.models.address import Address
from app.models.campaign import PromotionalCampaign
from app.models.commercial_condition import CommercialCondition
from app.models.order import Order, OrderItem
from app.models.product import Product
from app.models.store import Store, StoreSupplier
from app.models.supplier import Supplier
from app.models.user import User

__all__ = [
    "Address",
    "CommercialCondition",
    "Order",
    "OrderItem",
    "Product",
    "PromotionalCampaign",
    "Store",
    "StoreSupplier",
    "Supplier",
    "User",
]
