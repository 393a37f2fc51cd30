"""
Customer validators

Email and phone are optional; when present they must be well formed.
"""
from typing import List, Optional

from sales_api.domain.customer import CustomerCreate, CustomerUpdate
from sales_api.validators.base import (
    ValidationFailure,
    check_required_text,
    check_required_id,
    check_email,
    check_phone,
)


def _check_customer_fields(errors: List[ValidationFailure], name: Optional[str],
                           email: Optional[str], phone: Optional[str]) -> None:
    check_required_text(errors, "name", name, "Customer name", 2, 100)

    if email:
        if len(email) > 100:
            errors.append(("email", "Customer email cannot be longer than 100 characters"))
        check_email(errors, "email", email, "Customer email must be a valid email address")

    if phone:
        check_phone(errors, "phone", phone, "Customer phone must be in valid international format")


def validate_create_customer(command: CustomerCreate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    _check_customer_fields(errors, command.name, command.email, command.phone)
    return errors


def validate_update_customer(command: CustomerUpdate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "id", command.id, "Customer ID")
    _check_customer_fields(errors, command.name, command.email, command.phone)
    return errors
