"""
Products API Endpoints
Handles product catalog management and queries

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from decimal import Decimal
from uuid import UUID
from pydantic import BaseModel

from sales_api.api.dependencies import get_product_service
from sales_api.api.responses import success, paged
from sales_api.core.config import settings
from sales_api.domain.product import ProductCreate, ProductUpdate
from sales_api.services.product_service import ProductService

router = APIRouter()


# Request models
class ProductRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    is_active: bool = True


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_product(request: ProductRequest, service: ProductService = Depends(get_product_service)):
    command = ProductCreate(
        name=request.name,
        description=request.description,
        price=request.price,
        is_active=request.is_active
    )
    return success(service.create_product(command), message="Product created successfully")


@router.get("/")
def list_products(
    page: int = Query(1, description="Page number (1-based)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size"),
    search: Optional[str] = Query(None, description="Search by name"),
    is_active: Optional[bool] = Query(None, description="Filter by active status"),
    service: ProductService = Depends(get_product_service)
):
    """
    Get products with optional filters, ordered by name
    """
    return paged(service.list_products(page, size, search=search, is_active=is_active))


@router.get("/{product_id}")
def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    return success(service.get_product(product_id))


@router.put("/{product_id}")
def update_product(
    product_id: UUID,
    request: ProductRequest,
    service: ProductService = Depends(get_product_service)
):
    command = ProductUpdate(
        id=product_id,
        name=request.name,
        description=request.description,
        price=request.price,
        is_active=request.is_active
    )
    return success(service.update_product(command), message="Product updated successfully")


@router.delete("/{product_id}")
def delete_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)
    return success(message="Product deleted successfully")
