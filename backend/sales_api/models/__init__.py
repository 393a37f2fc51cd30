"""
Modelos de base de datos
"""
from .branch import Branch
from .customer import Customer
from .product import Product
from .sale import Sale, SaleItem
from .user import User

__all__ = [
    "Branch",
    "Customer",
    "Product",
    "Sale",
    "SaleItem",
    "User",
]
