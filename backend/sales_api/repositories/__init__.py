"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic and never
commit; the unit of work does.

Author: TM3
Date: 2025-10-17
"""
from sales_api.repositories.branch_repository import BranchRepository
from sales_api.repositories.customer_repository import CustomerRepository
from sales_api.repositories.product_repository import ProductRepository
from sales_api.repositories.sale_repository import SaleRepository
from sales_api.repositories.sale_item_repository import SaleItemRepository
from sales_api.repositories.user_repository import UserRepository

__all__ = [
    'BranchRepository',
    'CustomerRepository',
    'ProductRepository',
    'SaleRepository',
    'SaleItemRepository',
    'UserRepository',
]
