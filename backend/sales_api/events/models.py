"""
Sale Event Payloads

Messages published after a sale or sale item change is committed.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sales_api.domain.common import utc_now
from sales_api.domain.sale import SaleStatus


class SaleEvent(BaseModel):
    """Fields shared by every sale event"""
    sale_id: UUID
    event_timestamp: datetime = Field(default_factory=utc_now)


class SaleCreatedEvent(SaleEvent):
    sale_number: str
    sale_date: datetime
    customer_id: UUID
    branch_id: UUID
    status: SaleStatus
    total_amount: Decimal
    item_count: int
    created_at: datetime


class SaleModifiedEvent(SaleEvent):
    sale_number: str
    sale_date: datetime
    customer_id: UUID
    branch_id: UUID
    status: SaleStatus
    total_amount: Decimal
    updated_at: Optional[datetime] = None


class SaleCancelledEvent(SaleEvent):
    sale_number: str
    customer_id: UUID
    branch_id: UUID
    total_amount: Decimal
    cancelled_at: Optional[datetime] = None


class SaleStatusChangedEvent(SaleEvent):
    sale_number: str
    previous_status: SaleStatus
    status: SaleStatus
    total_amount: Decimal
    customer_id: UUID
    branch_id: UUID
    updated_at: Optional[datetime] = None


class SaleItemAddedEvent(SaleEvent):
    sale_item_id: UUID
    product_id: UUID
    quantity: int
    unit_price: Decimal
    discount: Decimal
    total_amount: Decimal
    created_at: datetime


class SaleItemUpdatedEvent(SaleEvent):
    sale_item_id: UUID
    previous_product_id: UUID
    new_product_id: UUID
    previous_quantity: int
    new_quantity: int
    previous_unit_price: Decimal
    new_unit_price: Decimal
    previous_discount: Decimal
    new_discount: Decimal
    previous_total_amount: Decimal
    new_total_amount: Decimal
    updated_at: Optional[datetime] = None


class SaleItemCancelledEvent(SaleEvent):
    sale_item_id: UUID
    product_id: UUID
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    updated_at: Optional[datetime] = None
