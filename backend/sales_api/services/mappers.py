"""
Mappers - explicit conversions between layers

One function per (source, target) pair:
- create schemas -> domain entities
- domain entities -> service results
- domain entities -> event payloads

Author: TM3
Date: 2025-10-17
"""
from uuid import uuid4

from sales_api.domain.branch import Branch, BranchCreate
from sales_api.domain.customer import Customer, CustomerCreate
from sales_api.domain.product import Product, ProductCreate
from sales_api.domain.sale import Sale, SaleItem, SaleCreate, SaleStatus
from sales_api.domain.user import User, UserCreate
from sales_api.events.models import (
    SaleCreatedEvent,
    SaleModifiedEvent,
    SaleCancelledEvent,
    SaleStatusChangedEvent,
    SaleItemAddedEvent,
    SaleItemUpdatedEvent,
    SaleItemCancelledEvent,
)
from sales_api.services.results import (
    BranchResult,
    CustomerResult,
    ProductResult,
    SaleResult,
    SaleItemResult,
    UserResult,
)


# ============================================================================
# Branches
# ============================================================================

def branch_from_create(command: BranchCreate) -> Branch:
    return Branch(name=command.name, is_active=command.is_active)


def branch_to_result(branch: Branch) -> BranchResult:
    return BranchResult(
        id=branch.id,
        name=branch.name,
        is_active=branch.is_active,
        created_at=branch.created_at,
        updated_at=branch.updated_at
    )


# ============================================================================
# Customers
# ============================================================================

def customer_from_create(command: CustomerCreate) -> Customer:
    return Customer(
        name=command.name,
        email=command.email or None,
        phone=command.phone or None,
        is_active=command.is_active
    )


def customer_to_result(customer: Customer) -> CustomerResult:
    return CustomerResult(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        is_active=customer.is_active,
        created_at=customer.created_at,
        updated_at=customer.updated_at
    )


# ============================================================================
# Products
# ============================================================================

def product_from_create(command: ProductCreate) -> Product:
    return Product(
        name=command.name,
        description=command.description,
        price=command.price,
        is_active=command.is_active
    )


def product_to_result(product: Product) -> ProductResult:
    return ProductResult(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        is_active=product.is_active,
        created_at=product.created_at,
        updated_at=product.updated_at
    )


# ============================================================================
# Sales
# ============================================================================

def sale_from_create(command: SaleCreate) -> Sale:
    """New Pending sale with the command's items (totals computed by the domain)"""
    sale_id = uuid4()
    items = [
        SaleItem(
            sale_id=sale_id,
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            discount=item.discount
        )
        for item in command.items
    ]
    return Sale(
        id=sale_id,
        sale_number=command.sale_number,
        sale_date=command.sale_date,
        customer_id=command.customer_id,
        branch_id=command.branch_id,
        status=SaleStatus.PENDING,
        items=items
    )


def sale_item_to_result(item: SaleItem) -> SaleItemResult:
    return SaleItemResult(
        id=item.id,
        sale_id=item.sale_id,
        product_id=item.product_id,
        quantity=item.quantity,
        unit_price=item.unit_price,
        discount=item.discount,
        total_amount=item.total_amount,
        is_cancelled=item.is_cancelled,
        created_at=item.created_at,
        updated_at=item.updated_at
    )


def sale_to_result(sale: Sale) -> SaleResult:
    return SaleResult(
        id=sale.id,
        sale_number=sale.sale_number,
        sale_date=sale.sale_date,
        customer_id=sale.customer_id,
        branch_id=sale.branch_id,
        status=sale.status,
        total_amount=sale.total_amount,
        items=[sale_item_to_result(item) for item in sale.items],
        created_at=sale.created_at,
        updated_at=sale.updated_at
    )


# ============================================================================
# Users
# ============================================================================

def user_from_create(command: UserCreate, password_hash: str) -> User:
    return User(
        username=command.username,
        email=command.email,
        phone=command.phone or None,
        password=password_hash,
        role=command.role,
        status=command.status
    )


def user_to_result(user: User) -> UserResult:
    return UserResult(
        id=user.id,
        username=user.username,
        email=user.email,
        phone=user.phone,
        role=user.role,
        status=user.status,
        created_at=user.created_at,
        updated_at=user.updated_at
    )


# ============================================================================
# Events
# ============================================================================

def sale_to_created_event(sale: Sale) -> SaleCreatedEvent:
    return SaleCreatedEvent(
        sale_id=sale.id,
        sale_number=sale.sale_number,
        sale_date=sale.sale_date,
        customer_id=sale.customer_id,
        branch_id=sale.branch_id,
        status=sale.status,
        total_amount=sale.total_amount,
        item_count=len(sale.items),
        created_at=sale.created_at
    )


def sale_to_modified_event(sale: Sale) -> SaleModifiedEvent:
    return SaleModifiedEvent(
        sale_id=sale.id,
        sale_number=sale.sale_number,
        sale_date=sale.sale_date,
        customer_id=sale.customer_id,
        branch_id=sale.branch_id,
        status=sale.status,
        total_amount=sale.total_amount,
        updated_at=sale.updated_at
    )


def sale_to_cancelled_event(sale: Sale) -> SaleCancelledEvent:
    return SaleCancelledEvent(
        sale_id=sale.id,
        sale_number=sale.sale_number,
        customer_id=sale.customer_id,
        branch_id=sale.branch_id,
        total_amount=sale.total_amount,
        cancelled_at=sale.updated_at
    )


def sale_to_status_changed_event(sale: Sale, previous_status: SaleStatus) -> SaleStatusChangedEvent:
    return SaleStatusChangedEvent(
        sale_id=sale.id,
        sale_number=sale.sale_number,
        previous_status=previous_status,
        status=sale.status,
        total_amount=sale.total_amount,
        customer_id=sale.customer_id,
        branch_id=sale.branch_id,
        updated_at=sale.updated_at
    )


def sale_item_to_added_event(item: SaleItem) -> SaleItemAddedEvent:
    return SaleItemAddedEvent(
        sale_id=item.sale_id,
        sale_item_id=item.id,
        product_id=item.product_id,
        quantity=item.quantity,
        unit_price=item.unit_price,
        discount=item.discount,
        total_amount=item.total_amount,
        created_at=item.created_at
    )


def sale_item_to_updated_event(previous: SaleItem, item: SaleItem) -> SaleItemUpdatedEvent:
    return SaleItemUpdatedEvent(
        sale_id=item.sale_id,
        sale_item_id=item.id,
        previous_product_id=previous.product_id,
        new_product_id=item.product_id,
        previous_quantity=previous.quantity,
        new_quantity=item.quantity,
        previous_unit_price=previous.unit_price,
        new_unit_price=item.unit_price,
        previous_discount=previous.discount,
        new_discount=item.discount,
        previous_total_amount=previous.total_amount,
        new_total_amount=item.total_amount,
        updated_at=item.updated_at
    )


def sale_item_to_cancelled_event(item: SaleItem) -> SaleItemCancelledEvent:
    return SaleItemCancelledEvent(
        sale_id=item.sale_id,
        sale_item_id=item.id,
        product_id=item.product_id,
        quantity=item.quantity,
        unit_price=item.unit_price,
        total_amount=item.total_amount,
        updated_at=item.updated_at
    )
