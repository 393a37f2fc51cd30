"""
Sale validators
"""
from datetime import datetime
from typing import List, Optional

from sales_api.domain.common import utc_now
from sales_api.domain.sale import SaleCreate, SaleUpdate, SaleStatusUpdate
from sales_api.validators.base import ValidationFailure, check_required_id, is_in_future
from sales_api.validators.sale_item import validate_sale_item_fields

MAX_SALE_NUMBER_LENGTH = 50


def _check_sale_header(errors: List[ValidationFailure], command, now: datetime) -> None:
    sale_number: Optional[str] = command.sale_number
    if sale_number is None or not sale_number.strip():
        errors.append(("sale_number", "Sale number is required"))
    elif len(sale_number) > MAX_SALE_NUMBER_LENGTH:
        errors.append(("sale_number", f"Sale number cannot be longer than {MAX_SALE_NUMBER_LENGTH} characters"))

    if command.sale_date is None:
        errors.append(("sale_date", "Sale date is required"))
    elif is_in_future(command.sale_date, now):
        errors.append(("sale_date", "Sale date cannot be in the future"))

    check_required_id(errors, "customer_id", command.customer_id, "Customer ID")
    check_required_id(errors, "branch_id", command.branch_id, "Branch ID")


def validate_create_sale(command: SaleCreate, now: Optional[datetime] = None) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    _check_sale_header(errors, command, now or utc_now())

    for index, item in enumerate(command.items):
        errors.extend(validate_sale_item_fields(item, prefix=f"items[{index}]."))

    return errors


def validate_update_sale(command: SaleUpdate, now: Optional[datetime] = None) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "id", command.id, "Sale ID")
    _check_sale_header(errors, command, now or utc_now())
    return errors


def validate_update_sale_status(command: SaleStatusUpdate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "id", command.id, "Sale ID")
    if command.status is None:
        errors.append(("status", "Status is required"))
    return errors
