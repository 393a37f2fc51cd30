"""
Validation helpers

Validators are plain functions returning a list of (field, message)
pairs. Every rule runs so callers get the full error report at once.

Author: TM3
Date: 2025-10-17
"""
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple
from uuid import UUID

from email_validator import validate_email, EmailNotValidError

from sales_api.core.errors import ValidationError
from sales_api.domain.common import CENTS

ValidationFailure = Tuple[str, str]

PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")
NIL_UUID = UUID(int=0)


def ensure_valid(errors: List[ValidationFailure]) -> None:
    """Raise ValidationError carrying every failure, if there is any"""
    if errors:
        raise ValidationError(errors)


def check_required_text(errors: List[ValidationFailure], field: str, value: Optional[str],
                        label: str, min_length: int, max_length: int) -> None:
    if value is None or not value.strip():
        errors.append((field, f"{label} is required"))
    elif not min_length <= len(value) <= max_length:
        errors.append((field, f"{label} must be between {min_length} and {max_length} characters"))


def check_required_id(errors: List[ValidationFailure], field: str, value: Optional[UUID], label: str) -> None:
    if value is None or value == NIL_UUID:
        errors.append((field, f"{label} is required"))


def check_email(errors: List[ValidationFailure], field: str, value: Optional[str], message: str) -> None:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        errors.append((field, message))


def check_phone(errors: List[ValidationFailure], field: str, value: Optional[str], message: str) -> None:
    if not PHONE_PATTERN.match(value):
        errors.append((field, message))


def to_decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def exceeds_money_scale(value: Decimal) -> bool:
    """True when `value` has more decimal places than a money column stores"""
    return value != value.quantize(CENTS)


def is_in_future(value: datetime, now: datetime) -> bool:
    """Compare against `now`; naive datetimes are treated as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=now.tzinfo)
    return value > now


def validate_id(value: Optional[UUID], label: str, field: str = "id") -> List[ValidationFailure]:
    """Rule set for operations that only take an identifier (get, delete)"""
    errors: List[ValidationFailure] = []
    check_required_id(errors, field, value, label)
    return errors
