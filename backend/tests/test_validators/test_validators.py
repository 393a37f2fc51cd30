"""
Unit tests for command validators

Every rule is checked at its boundary; validators report all failures
at once as (field, message) pairs.

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import timedelta
from decimal import Decimal
from uuid import UUID, uuid4

from sales_api.core.errors import ValidationError
from sales_api.domain.branch import BranchCreate, BranchUpdate
from sales_api.domain.common import utc_now
from sales_api.domain.customer import CustomerCreate
from sales_api.domain.product import ProductCreate, ProductUpdate
from sales_api.domain.sale import SaleCreate, SaleItemCreate, SaleItemUpdate, SaleStatusUpdate
from sales_api.domain.user import UserCreate
from sales_api.validators import (
    ensure_valid,
    validate_id,
    validate_page_request,
    validate_create_branch,
    validate_update_branch,
    validate_create_customer,
    validate_create_product,
    validate_update_product,
    validate_create_sale,
    validate_create_sale_item,
    validate_update_sale_item,
    validate_update_sale_status,
    validate_create_user,
)


def fields(errors):
    return [field for field, _ in errors]


def messages(errors):
    return [message for _, message in errors]


class TestBranchValidator:

    def test_valid_branch(self):
        assert validate_create_branch(BranchCreate(name="Centro")) == []

    def test_name_required(self):
        errors = validate_create_branch(BranchCreate(name="  "))

        assert errors == [("name", "Branch name is required")]

    def test_name_length(self):
        errors = validate_create_branch(BranchCreate(name="A"))

        assert messages(errors) == ["Branch name must be between 2 and 100 characters"]

    def test_update_requires_id(self):
        errors = validate_update_branch(BranchUpdate(id=UUID(int=0), name="Centro"))

        assert errors == [("id", "Branch ID is required")]


class TestCustomerValidator:

    def test_valid_customer_without_contact(self):
        assert validate_create_customer(CustomerCreate(name="Ana")) == []

    def test_invalid_email_and_phone(self):
        errors = validate_create_customer(CustomerCreate(name="Ana", email="not-an-email", phone="0123"))

        assert ("email", "Customer email must be a valid email address") in errors
        assert ("phone", "Customer phone must be in valid international format") in errors

    def test_international_phone_accepted(self):
        errors = validate_create_customer(CustomerCreate(name="Ana", phone="+5511999990000"))

        assert errors == []


class TestProductValidator:

    @pytest.mark.parametrize("price,message", [
        (None, "Product price is required"),
        (Decimal("0"), "Product price must be greater than zero"),
        (Decimal("-1"), "Product price must be greater than zero"),
        (Decimal("1000000.00"), "Product price cannot exceed 999,999.99"),
    ])
    def test_invalid_price(self, price, message):
        errors = validate_create_product(ProductCreate(name="Agua", price=price))

        assert errors == [("price", message)]

    def test_maximum_price_accepted(self):
        errors = validate_create_product(ProductCreate(name="Agua", price=Decimal("999999.99")))

        assert errors == []

    @pytest.mark.parametrize("price", [Decimal("0.001"), Decimal("1.005")])
    def test_price_limited_to_cents(self, price):
        errors = validate_create_product(ProductCreate(name="Agua", price=price))

        assert errors == [("price", "Product price cannot have more than 2 decimal places")]

    def test_trailing_zeros_are_not_extra_places(self):
        assert validate_create_product(ProductCreate(name="Agua", price=Decimal("1.500"))) == []

    def test_description_length(self):
        errors = validate_create_product(ProductCreate(name="Agua", price=Decimal("1"), description="x" * 501))

        assert fields(errors) == ["description"]

    def test_all_failures_reported(self):
        errors = validate_update_product(ProductUpdate(id=None, name="", price=None))

        assert fields(errors) == ["id", "name", "price"]


class TestPageRequestValidator:

    def test_valid_request(self):
        assert validate_page_request(1, 10) == []

    def test_page_and_size_must_be_positive(self):
        errors = validate_page_request(0, 0)

        assert errors == [
            ("page", "Page must be greater than 0"),
            ("size", "Size must be greater than 0"),
        ]

    def test_size_upper_bound(self):
        assert validate_page_request(1, 100) == []
        assert validate_page_request(1, 101) == [("size", "Size cannot exceed 100")]

    def test_search_terms_limited(self):
        errors = validate_page_request(1, 10, "x" * 101, name="y" * 101, email=None)

        assert sorted(fields(errors)) == ["name", "search"]


class TestSaleItemValidator:

    def make_item(self, **overrides):
        data = {
            "sale_id": uuid4(),
            "product_id": uuid4(),
            "quantity": 1,
            "unit_price": Decimal("10.00"),
            "discount": Decimal("0"),
        }
        data.update(overrides)
        return SaleItemCreate(**data)

    def test_quantity_boundary(self):
        assert validate_create_sale_item(self.make_item(quantity=20)) == []
        assert validate_create_sale_item(self.make_item(quantity=21)) == [
            ("quantity", "Quantity cannot exceed 20 items per sale item")
        ]

    def test_quantity_must_be_positive(self):
        errors = validate_create_sale_item(self.make_item(quantity=0))

        assert errors == [("quantity", "Quantity must be greater than 0")]

    def test_discount_boundary(self):
        assert validate_create_sale_item(self.make_item(discount=Decimal("100"))) == []
        assert validate_create_sale_item(self.make_item(discount=Decimal("100.01"))) == [
            ("discount", "Discount cannot exceed 100%")
        ]

    def test_negative_discount(self):
        errors = validate_create_sale_item(self.make_item(discount=Decimal("-1")))

        assert errors == [("discount", "Discount cannot be negative")]

    def test_unit_price_bounds(self):
        assert validate_create_sale_item(self.make_item(unit_price=Decimal("10000"))) == []
        assert messages(validate_create_sale_item(self.make_item(unit_price=Decimal("10000.01")))) == [
            "Unit price cannot exceed $10,000"
        ]
        assert messages(validate_create_sale_item(self.make_item(unit_price=Decimal("0")))) == [
            "Unit price must be greater than 0"
        ]

    def test_unit_price_and_discount_limited_to_cents(self):
        errors = validate_create_sale_item(
            self.make_item(unit_price=Decimal("1.005"), discount=Decimal("12.345"))
        )

        assert errors == [
            ("unit_price", "Unit price cannot have more than 2 decimal places"),
            ("discount", "Discount cannot have more than 2 decimal places"),
        ]

    def test_sale_id_required_when_adding(self):
        errors = validate_create_sale_item(self.make_item(sale_id=None))

        assert errors == [("sale_id", "Sale ID is required")]

    def test_update_requires_ids(self):
        errors = validate_update_sale_item(SaleItemUpdate(quantity=1))

        assert fields(errors) == ["id", "sale_id", "product_id"]


class TestSaleValidator:

    def make_sale(self, **overrides):
        data = {
            "sale_number": "S-0001",
            "sale_date": utc_now() - timedelta(minutes=5),
            "customer_id": uuid4(),
            "branch_id": uuid4(),
        }
        data.update(overrides)
        return SaleCreate(**data)

    def test_valid_sale(self):
        assert validate_create_sale(self.make_sale()) == []

    def test_sale_date_in_future(self):
        errors = validate_create_sale(self.make_sale(sale_date=utc_now() + timedelta(days=1)))

        assert errors == [("sale_date", "Sale date cannot be in the future")]

    def test_sale_number_length(self):
        errors = validate_create_sale(self.make_sale(sale_number="S" * 51))

        assert fields(errors) == ["sale_number"]

    def test_missing_header_fields(self):
        errors = validate_create_sale(SaleCreate())

        assert fields(errors) == ["sale_number", "sale_date", "customer_id", "branch_id"]

    def test_item_errors_are_located(self):
        command = self.make_sale(items=[
            SaleItemCreate(product_id=uuid4(), quantity=1, unit_price=Decimal("1")),
            SaleItemCreate(product_id=uuid4(), quantity=21, unit_price=Decimal("1")),
        ])

        errors = validate_create_sale(command)

        assert errors == [("items[1].quantity", "Quantity cannot exceed 20 items per sale item")]

    def test_status_update_requires_status(self):
        errors = validate_update_sale_status(SaleStatusUpdate(id=uuid4()))

        assert errors == [("status", "Status is required")]


class TestUserValidator:

    def test_valid_user(self):
        command = UserCreate(username="maria", email="maria@mail.com", password="Secret#123")

        assert validate_create_user(command) == []

    def test_weak_password_reports_each_rule(self):
        command = UserCreate(username="maria", email="maria@mail.com", password="abc")

        assert messages(validate_create_user(command)) == [
            "Password must be at least 8 characters long",
            "Password must contain at least one uppercase letter",
            "Password must contain at least one number",
            "Password must contain at least one special character",
        ]

    def test_username_length(self):
        command = UserCreate(username="ab", email="maria@mail.com", password="Secret#123")

        assert fields(validate_create_user(command)) == ["username"]


class TestEnsureValid:

    def test_no_errors_passes(self):
        ensure_valid([])

    def test_raises_with_all_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid(validate_id(None, "Sale ID") + validate_page_request(0, 10))

        assert exc_info.value.to_list() == [
            {"field": "id", "message": "Sale ID is required"},
            {"field": "page", "message": "Page must be greater than 0"},
        ]
