"""
Product validators
"""
from decimal import Decimal
from typing import List

from sales_api.domain.product import ProductCreate, ProductUpdate
from sales_api.validators.base import (
    ValidationFailure,
    check_required_text,
    check_required_id,
    exceeds_money_scale,
    to_decimal,
)

MAX_PRICE = Decimal("999999.99")


def _check_product_fields(errors: List[ValidationFailure], command) -> None:
    check_required_text(errors, "name", command.name, "Product name", 2, 100)

    if command.description and len(command.description) > 500:
        errors.append(("description", "Product description cannot be longer than 500 characters"))

    price = to_decimal(command.price)
    if price is None:
        errors.append(("price", "Product price is required"))
    elif price <= 0:
        errors.append(("price", "Product price must be greater than zero"))
    elif price > MAX_PRICE:
        errors.append(("price", "Product price cannot exceed 999,999.99"))
    elif exceeds_money_scale(price):
        errors.append(("price", "Product price cannot have more than 2 decimal places"))


def validate_create_product(command: ProductCreate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    _check_product_fields(errors, command)
    return errors


def validate_update_product(command: ProductUpdate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "id", command.id, "Product ID")
    _check_product_fields(errors, command)
    return errors
