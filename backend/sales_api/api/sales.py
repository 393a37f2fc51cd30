"""
Sales API Endpoints
Sales, their status transitions and their items

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID
from pydantic import BaseModel, Field

from sales_api.api.dependencies import get_sale_service, get_sale_item_service
from sales_api.api.responses import success, paged
from sales_api.core.config import settings
from sales_api.domain.sale import (
    SaleCreate,
    SaleItemCreate,
    SaleItemUpdate,
    SaleStatus,
    SaleStatusUpdate,
    SaleUpdate,
)
from sales_api.services.sale_item_service import SaleItemService
from sales_api.services.sale_service import SaleService

router = APIRouter()


# Request models
class SaleItemRequest(BaseModel):
    product_id: Optional[UUID] = None
    quantity: int = 0
    unit_price: Optional[Decimal] = None
    discount: Decimal = Decimal("0")


class CreateSaleRequest(BaseModel):
    sale_number: Optional[str] = None
    sale_date: Optional[datetime] = None
    customer_id: Optional[UUID] = None
    branch_id: Optional[UUID] = None
    items: List[SaleItemRequest] = Field(default_factory=list)


class UpdateSaleRequest(BaseModel):
    sale_number: Optional[str] = None
    sale_date: Optional[datetime] = None
    customer_id: Optional[UUID] = None
    branch_id: Optional[UUID] = None
    status: Optional[SaleStatus] = None


class SaleStatusRequest(BaseModel):
    status: Optional[SaleStatus] = None


class UpdateSaleItemRequest(BaseModel):
    product_id: Optional[UUID] = None
    quantity: int = 0


# ============================================================================
# Sales
# ============================================================================

@router.post("/", status_code=status.HTTP_201_CREATED)
def create_sale(request: CreateSaleRequest, service: SaleService = Depends(get_sale_service)):
    command = SaleCreate(
        sale_number=request.sale_number,
        sale_date=request.sale_date,
        customer_id=request.customer_id,
        branch_id=request.branch_id,
        items=[
            SaleItemCreate(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                discount=item.discount
            )
            for item in request.items
        ]
    )
    return success(service.create_sale(command), message="Sale created successfully")


@router.get("/")
def list_sales(
    page: int = Query(1, description="Page number (1-based)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size"),
    sale_number: Optional[str] = Query(None, description="Filter by sale number (contains)"),
    customer_id: Optional[UUID] = Query(None, description="Filter by customer"),
    branch_id: Optional[UUID] = Query(None, description="Filter by branch"),
    sale_status: Optional[SaleStatus] = Query(None, alias="status", description="Filter by status"),
    service: SaleService = Depends(get_sale_service)
):
    """
    Get sales with optional filters, newest first
    """
    return paged(service.list_sales(
        page,
        size,
        sale_number=sale_number,
        customer_id=customer_id,
        branch_id=branch_id,
        status=sale_status
    ))


@router.get("/{sale_id}")
def get_sale(sale_id: UUID, service: SaleService = Depends(get_sale_service)):
    return success(service.get_sale(sale_id))


@router.put("/{sale_id}")
def update_sale(sale_id: UUID, request: UpdateSaleRequest, service: SaleService = Depends(get_sale_service)):
    command = SaleUpdate(
        id=sale_id,
        sale_number=request.sale_number,
        sale_date=request.sale_date,
        customer_id=request.customer_id,
        branch_id=request.branch_id,
        status=request.status
    )
    return success(service.update_sale(command), message="Sale updated successfully")


@router.patch("/{sale_id}/status")
def update_sale_status(
    sale_id: UUID,
    request: SaleStatusRequest,
    service: SaleService = Depends(get_sale_service)
):
    """
    Move a sale to another status

    Closed applies the automatic quantity discounts; Pending reactivates
    a cancelled sale.
    """
    command = SaleStatusUpdate(id=sale_id, status=request.status)
    return success(service.update_sale_status(command), message="Sale status updated successfully")


@router.delete("/{sale_id}")
def delete_sale(sale_id: UUID, service: SaleService = Depends(get_sale_service)):
    service.delete_sale(sale_id)
    return success(message="Sale deleted successfully")


# ============================================================================
# Sale items
# ============================================================================

@router.post("/{sale_id}/items", status_code=status.HTTP_201_CREATED)
def add_sale_item(
    sale_id: UUID,
    request: SaleItemRequest,
    service: SaleItemService = Depends(get_sale_item_service)
):
    command = SaleItemCreate(
        sale_id=sale_id,
        product_id=request.product_id,
        quantity=request.quantity,
        unit_price=request.unit_price,
        discount=request.discount
    )
    return success(service.add_item(command), message="Sale item created successfully")


@router.get("/{sale_id}/items")
def list_sale_items(
    sale_id: UUID,
    page: int = Query(1, description="Page number (1-based)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size"),
    service: SaleItemService = Depends(get_sale_item_service)
):
    return paged(service.list_items(sale_id, page, size))


@router.get("/{sale_id}/items/{item_id}")
def get_sale_item(sale_id: UUID, item_id: UUID, service: SaleItemService = Depends(get_sale_item_service)):
    return success(service.get_item(sale_id, item_id))


@router.put("/{sale_id}/items/{item_id}")
def update_sale_item(
    sale_id: UUID,
    item_id: UUID,
    request: UpdateSaleItemRequest,
    service: SaleItemService = Depends(get_sale_item_service)
):
    command = SaleItemUpdate(
        id=item_id,
        sale_id=sale_id,
        product_id=request.product_id,
        quantity=request.quantity
    )
    return success(service.update_item(command), message="Sale item updated successfully")


@router.delete("/{sale_id}/items/{item_id}")
def delete_sale_item(sale_id: UUID, item_id: UUID, service: SaleItemService = Depends(get_sale_item_service)):
    service.delete_item(sale_id, item_id)
    return success(message="Sale item deleted successfully")
