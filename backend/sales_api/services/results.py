"""
Service results

What services hand back to callers. Password hashes never appear here.

Author: TM3
Date: 2025-10-17
"""
import math
from pydantic import BaseModel, Field, ConfigDict
from typing import Generic, List, Optional, TypeVar
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sales_api.domain.sale import SaleStatus
from sales_api.domain.user import UserRole, UserStatus

T = TypeVar("T")


class ResultModel(BaseModel):
    model_config = ConfigDict(
        json_encoders={
            Decimal: float,  # Convert Decimal to float for JSON
        }
    )


class BranchResult(ResultModel):
    id: UUID
    name: str
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class CustomerResult(ResultModel):
    id: UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class ProductResult(ResultModel):
    id: UUID
    name: str
    description: Optional[str] = None
    price: Decimal
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class SaleItemResult(ResultModel):
    id: UUID
    sale_id: UUID
    product_id: UUID
    quantity: int
    unit_price: Decimal
    discount: Decimal
    total_amount: Decimal
    is_cancelled: bool
    created_at: datetime
    updated_at: Optional[datetime] = None


class SaleResult(ResultModel):
    id: UUID
    sale_number: str
    sale_date: datetime
    customer_id: UUID
    branch_id: UUID
    status: SaleStatus
    total_amount: Decimal
    items: List[SaleItemResult] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserResult(ResultModel):
    id: UUID
    username: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    status: UserStatus
    created_at: datetime
    updated_at: Optional[datetime] = None


class PagedResult(BaseModel, Generic[T]):
    """
    One page of results

    total_pages = ceil(total_count / size), has_next = page < total_pages,
    has_previous = page > 1.
    """
    items: List[T]
    page: int
    size: int
    total_count: int
    total_pages: int
    has_next: bool
    has_previous: bool


def build_page(items: List[T], total_count: int, page: int, size: int) -> PagedResult[T]:
    """Wrap a page of items with its paging metadata"""
    total_pages = math.ceil(total_count / size) if size > 0 else 0

    return PagedResult(
        items=items,
        page=page,
        size=size,
        total_count=total_count,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1
    )
