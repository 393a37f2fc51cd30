"""
Sale item validators

Quantity is limited to 20 per item; the automatic discount rules on
close are enforced by the Sale aggregate, not here.
"""
from decimal import Decimal
from typing import List

from sales_api.domain.sale import SaleItemCreate, SaleItemUpdate, MAX_IDENTICAL_ITEMS
from sales_api.validators.base import ValidationFailure, check_required_id, exceeds_money_scale, to_decimal

MAX_UNIT_PRICE = Decimal("10000")


def check_quantity(errors: List[ValidationFailure], field: str, quantity: int) -> None:
    if quantity <= 0:
        errors.append((field, "Quantity must be greater than 0"))
    elif quantity > MAX_IDENTICAL_ITEMS:
        errors.append((field, f"Quantity cannot exceed {MAX_IDENTICAL_ITEMS} items per sale item"))


def check_unit_price(errors: List[ValidationFailure], field: str, value) -> None:
    unit_price = to_decimal(value)
    if unit_price is None:
        errors.append((field, "Unit price is required"))
    elif unit_price <= 0:
        errors.append((field, "Unit price must be greater than 0"))
    elif unit_price > MAX_UNIT_PRICE:
        errors.append((field, "Unit price cannot exceed $10,000"))
    elif exceeds_money_scale(unit_price):
        errors.append((field, "Unit price cannot have more than 2 decimal places"))


def check_discount(errors: List[ValidationFailure], field: str, value) -> None:
    discount = to_decimal(value)
    if discount is None:
        errors.append((field, "Discount is required"))
    elif discount < 0:
        errors.append((field, "Discount cannot be negative"))
    elif discount > 100:
        errors.append((field, "Discount cannot exceed 100%"))
    elif exceeds_money_scale(discount):
        errors.append((field, "Discount cannot have more than 2 decimal places"))


def validate_sale_item_fields(item: SaleItemCreate, prefix: str = "") -> List[ValidationFailure]:
    """Rules for one item line; `prefix` locates the item inside a sale (e.g. "items[0].")"""
    errors: List[ValidationFailure] = []
    check_required_id(errors, f"{prefix}product_id", item.product_id, "Product ID")
    check_quantity(errors, f"{prefix}quantity", item.quantity)
    check_unit_price(errors, f"{prefix}unit_price", item.unit_price)
    check_discount(errors, f"{prefix}discount", item.discount)
    return errors


def validate_create_sale_item(command: SaleItemCreate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "sale_id", command.sale_id, "Sale ID")
    errors.extend(validate_sale_item_fields(command))
    return errors


def validate_update_sale_item(command: SaleItemUpdate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "id", command.id, "Sale item ID")
    check_required_id(errors, "sale_id", command.sale_id, "Sale ID")
    check_required_id(errors, "product_id", command.product_id, "Product ID")
    check_quantity(errors, "quantity", command.quantity)
    return errors
