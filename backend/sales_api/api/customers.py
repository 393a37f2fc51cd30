"""
Customers API Endpoints

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from sales_api.api.dependencies import get_customer_service
from sales_api.api.responses import success, paged
from sales_api.core.config import settings
from sales_api.domain.customer import CustomerCreate, CustomerUpdate
from sales_api.services.customer_service import CustomerService

router = APIRouter()


# Request models
class CustomerRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_customer(request: CustomerRequest, service: CustomerService = Depends(get_customer_service)):
    command = CustomerCreate(
        name=request.name,
        email=request.email,
        phone=request.phone,
        is_active=request.is_active
    )
    return success(service.create_customer(command), message="Customer created successfully")


@router.get("/")
def list_customers(
    page: int = Query(1, description="Page number (1-based)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size"),
    name: Optional[str] = Query(None, description="Filter by name (contains)"),
    email: Optional[str] = Query(None, description="Filter by email (contains)"),
    service: CustomerService = Depends(get_customer_service)
):
    return paged(service.list_customers(page, size, name=name, email=email))


@router.get("/{customer_id}")
def get_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    return success(service.get_customer(customer_id))


@router.put("/{customer_id}")
def update_customer(
    customer_id: UUID,
    request: CustomerRequest,
    service: CustomerService = Depends(get_customer_service)
):
    command = CustomerUpdate(
        id=customer_id,
        name=request.name,
        email=request.email,
        phone=request.phone,
        is_active=request.is_active
    )
    return success(service.update_customer(command), message="Customer updated successfully")


@router.delete("/{customer_id}")
def delete_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    service.delete_customer(customer_id)
    return success(message="Customer deleted successfully")
