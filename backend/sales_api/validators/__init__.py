"""
Validation Layer

One function per command; each returns every (field, message)
failure found, and `ensure_valid` turns them into a ValidationError.

Author: TM3
Date: 2025-10-17
"""
from sales_api.validators.base import ValidationFailure, ensure_valid, validate_id
from sales_api.validators.branch import validate_create_branch, validate_update_branch
from sales_api.validators.customer import validate_create_customer, validate_update_customer
from sales_api.validators.product import validate_create_product, validate_update_product
from sales_api.validators.pagination import validate_page_request
from sales_api.validators.sale import validate_create_sale, validate_update_sale, validate_update_sale_status
from sales_api.validators.sale_item import validate_create_sale_item, validate_update_sale_item
from sales_api.validators.user import validate_create_user

__all__ = [
    'ValidationFailure',
    'ensure_valid',
    'validate_id',
    'validate_create_branch',
    'validate_update_branch',
    'validate_create_customer',
    'validate_update_customer',
    'validate_create_product',
    'validate_update_product',
    'validate_page_request',
    'validate_create_sale',
    'validate_update_sale',
    'validate_update_sale_status',
    'validate_create_sale_item',
    'validate_update_sale_item',
    'validate_create_user',
]
