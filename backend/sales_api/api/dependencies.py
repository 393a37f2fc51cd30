"""
Service factories for FastAPI Depends

Each request gets its own session; the services built here share it
through their repositories and unit of work.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from sales_api.core.database import get_db
from sales_api.core.security import PasswordHasher, get_password_hasher
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.events.publisher import MessagePublisher, get_message_publisher
from sales_api.repositories import (
    BranchRepository,
    CustomerRepository,
    ProductRepository,
    SaleRepository,
    SaleItemRepository,
    UserRepository,
)
from sales_api.services.branch_service import BranchService
from sales_api.services.customer_service import CustomerService
from sales_api.services.product_service import ProductService
from sales_api.services.sale_service import SaleService
from sales_api.services.sale_item_service import SaleItemService
from sales_api.services.user_service import UserService


def get_branch_service(db: Session = Depends(get_db)) -> BranchService:
    return BranchService(BranchRepository(db), UnitOfWork(db))


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(CustomerRepository(db), UnitOfWork(db))


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db), UnitOfWork(db))


def get_sale_service(
    db: Session = Depends(get_db),
    publisher: MessagePublisher = Depends(get_message_publisher)
) -> SaleService:
    return SaleService(
        SaleRepository(db),
        CustomerRepository(db),
        BranchRepository(db),
        ProductRepository(db),
        UnitOfWork(db),
        publisher
    )


def get_sale_item_service(
    db: Session = Depends(get_db),
    publisher: MessagePublisher = Depends(get_message_publisher)
) -> SaleItemService:
    return SaleItemService(
        SaleRepository(db),
        SaleItemRepository(db),
        ProductRepository(db),
        UnitOfWork(db),
        publisher
    )


def get_user_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserService:
    return UserService(UserRepository(db), UnitOfWork(db), password_hasher)
