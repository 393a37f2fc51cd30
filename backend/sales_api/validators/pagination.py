"""
Paging validators shared by every list operation
"""
from typing import List, Optional

from sales_api.core.config import settings
from sales_api.validators.base import ValidationFailure

MAX_SEARCH_LENGTH = 100


def validate_page_request(page: int, size: int, search: Optional[str] = None,
                          **filters: Optional[str]) -> List[ValidationFailure]:
    """
    Page is 1-based; size must be in (0, MAX_PAGE_SIZE]

    `search` and any extra text filters (e.g. name=..., email=...) are
    limited to MAX_SEARCH_LENGTH characters.
    """
    errors: List[ValidationFailure] = []

    if page <= 0:
        errors.append(("page", "Page must be greater than 0"))

    if size <= 0:
        errors.append(("size", "Size must be greater than 0"))
    elif size > settings.MAX_PAGE_SIZE:
        errors.append(("size", f"Size cannot exceed {settings.MAX_PAGE_SIZE}"))

    terms = dict(filters, search=search)
    for field, value in terms.items():
        if value is not None and len(value) > MAX_SEARCH_LENGTH:
            errors.append((field, f"Search term cannot exceed {MAX_SEARCH_LENGTH} characters"))

    return errors
