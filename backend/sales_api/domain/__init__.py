"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities
and the create/update schemas services accept.

Author: TM3
Date: 2025-10-17
"""
from sales_api.domain.branch import Branch, BranchCreate, BranchUpdate
from sales_api.domain.customer import Customer, CustomerCreate, CustomerUpdate
from sales_api.domain.product import Product, ProductCreate, ProductUpdate
from sales_api.domain.sale import (
    Sale,
    SaleItem,
    SaleStatus,
    SaleCreate,
    SaleUpdate,
    SaleStatusUpdate,
    SaleItemCreate,
    SaleItemUpdate,
)
from sales_api.domain.user import User, UserCreate, UserRole, UserStatus

__all__ = [
    'Branch', 'BranchCreate', 'BranchUpdate',
    'Customer', 'CustomerCreate', 'CustomerUpdate',
    'Product', 'ProductCreate', 'ProductUpdate',
    'Sale', 'SaleItem', 'SaleStatus', 'SaleCreate', 'SaleUpdate', 'SaleStatusUpdate',
    'SaleItemCreate', 'SaleItemUpdate',
    'User', 'UserCreate', 'UserRole', 'UserStatus',
]
