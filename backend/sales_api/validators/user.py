"""
User validators
"""
import re
from typing import List

from sales_api.domain.user import UserCreate
from sales_api.validators.base import ValidationFailure, check_email, check_phone

PASSWORD_RULES = [
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one number"),
    (re.compile(r"[\!\?\*\.\@\#\$\%\^\&\-\_]"), "Password must contain at least one special character"),
]


def validate_create_user(command: UserCreate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []

    username = command.username
    if not username or not username.strip():
        errors.append(("username", "Username is required"))
    elif not 3 <= len(username) <= 50:
        errors.append(("username", "Username must be between 3 and 50 characters"))

    if not command.email:
        errors.append(("email", "Email is required"))
    else:
        check_email(errors, "email", command.email, "Email must be a valid email address")

    if command.phone:
        check_phone(errors, "phone", command.phone, "Phone number must be in valid international format")

    password = command.password or ""
    if len(password) < 8:
        errors.append(("password", "Password must be at least 8 characters long"))
    for pattern, message in PASSWORD_RULES:
        if not pattern.search(password):
            errors.append(("password", message))

    if command.role is None:
        errors.append(("role", "Role is required"))
    if command.status is None:
        errors.append(("status", "Status is required"))

    return errors
