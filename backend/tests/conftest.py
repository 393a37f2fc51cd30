"""
Pytest fixtures and configuration for Sales API Backend tests

This file provides shared fixtures that can be used across all test modules.
Every test gets its own in-memory SQLite database.

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import timedelta
from decimal import Decimal
from unittest.mock import Mock

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from sales_api import models  # noqa: F401  (registers tables on Base)
from sales_api.core.database import Base, get_db
from sales_api.core.security import PasswordHasher, get_password_hasher
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.branch import Branch
from sales_api.domain.common import utc_now
from sales_api.domain.customer import Customer
from sales_api.domain.product import Product
from sales_api.domain.sale import SaleCreate, SaleItemCreate
from sales_api.events.publisher import LoggingMessagePublisher
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


# ============================================================================
# Database
# ============================================================================

@pytest.fixture(scope="function")
def engine():
    """
    In-memory SQLite engine shared by every connection of one test

    Scope: function (fresh schema per test)
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """
    Provides a SQLAlchemy session for each test

    Same settings as the application session factory (no autoflush).
    """
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def unit_of_work(db_session):
    return UnitOfWork(db_session)


# ============================================================================
# Collaborators
# ============================================================================

@pytest.fixture
def publisher():
    """Publisher double; assert on publish calls"""
    return Mock(spec=LoggingMessagePublisher)


@pytest.fixture(scope="session")
def password_hasher():
    """pbkdf2 keeps hashing fast in tests"""
    return PasswordHasher(schemes=["pbkdf2_sha256"])


# ============================================================================
# Repositories and services
# ============================================================================

@pytest.fixture
def branch_repository(db_session):
    return BranchRepository(db_session)


@pytest.fixture
def customer_repository(db_session):
    return CustomerRepository(db_session)


@pytest.fixture
def product_repository(db_session):
    return ProductRepository(db_session)


@pytest.fixture
def sale_repository(db_session):
    return SaleRepository(db_session)


@pytest.fixture
def sale_item_repository(db_session):
    return SaleItemRepository(db_session)


@pytest.fixture
def user_repository(db_session):
    return UserRepository(db_session)


@pytest.fixture
def branch_service(branch_repository, unit_of_work):
    return BranchService(branch_repository, unit_of_work)


@pytest.fixture
def customer_service(customer_repository, unit_of_work):
    return CustomerService(customer_repository, unit_of_work)


@pytest.fixture
def product_service(product_repository, unit_of_work):
    return ProductService(product_repository, unit_of_work)


@pytest.fixture
def sale_service(sale_repository, customer_repository, branch_repository, product_repository, unit_of_work, publisher):
    return SaleService(
        sale_repository, customer_repository, branch_repository, product_repository, unit_of_work, publisher
    )


@pytest.fixture
def sale_item_service(sale_repository, sale_item_repository, product_repository, unit_of_work, publisher):
    return SaleItemService(sale_repository, sale_item_repository, product_repository, unit_of_work, publisher)


@pytest.fixture
def user_service(user_repository, unit_of_work, password_hasher):
    return UserService(user_repository, unit_of_work, password_hasher)


# ============================================================================
# Sample data (persisted)
# ============================================================================

@pytest.fixture
def branch(db_session, branch_repository):
    branch = branch_repository.create(Branch(name="Centro"))
    db_session.commit()
    return branch


@pytest.fixture
def customer(db_session, customer_repository):
    customer = customer_repository.create(Customer(name="Ana Torres", email="ana.torres@mail.com"))
    db_session.commit()
    return customer


@pytest.fixture
def product(db_session, product_repository):
    product = product_repository.create(Product(name="Cerveza Lager", price=Decimal("10.00")))
    db_session.commit()
    return product


@pytest.fixture
def inactive_product(db_session, product_repository):
    product = product_repository.create(Product(name="Cerveza Retirada", price=Decimal("8.00"), is_active=False))
    db_session.commit()
    return product


@pytest.fixture
def sample_sale_command(branch, customer, product):
    """
    Provides a valid create-sale command with one item
    """
    return SaleCreate(
        sale_number="S-0001",
        sale_date=utc_now() - timedelta(hours=1),
        customer_id=customer.id,
        branch_id=branch.id,
        items=[
            SaleItemCreate(product_id=product.id, quantity=2, unit_price=Decimal("10.00")),
        ]
    )


# ============================================================================
# API
# ============================================================================

@pytest.fixture
def client(db_session, password_hasher):
    """
    TestClient bound to the test session

    The lifespan (database wait and create_all) is not run: the test
    engine already has the schema.
    """
    from sales_api.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher

    yield TestClient(app)

    app.dependency_overrides.clear()
