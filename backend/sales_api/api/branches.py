"""
Branches API Endpoints
Store branches where sales take place

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends, Query, status
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from sales_api.api.dependencies import get_branch_service
from sales_api.api.responses import success, paged
from sales_api.core.config import settings
from sales_api.domain.branch import BranchCreate, BranchUpdate
from sales_api.services.branch_service import BranchService

router = APIRouter()


# Request models
class BranchRequest(BaseModel):
    name: Optional[str] = None
    is_active: bool = True


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_branch(request: BranchRequest, service: BranchService = Depends(get_branch_service)):
    command = BranchCreate(name=request.name, is_active=request.is_active)
    return success(service.create_branch(command), message="Branch created successfully")


@router.get("/")
def list_branches(
    page: int = Query(1, description="Page number (1-based)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Page size"),
    name: Optional[str] = Query(None, description="Filter by name (contains)"),
    service: BranchService = Depends(get_branch_service)
):
    return paged(service.list_branches(page, size, name=name))


@router.get("/{branch_id}")
def get_branch(branch_id: UUID, service: BranchService = Depends(get_branch_service)):
    return success(service.get_branch(branch_id))


@router.put("/{branch_id}")
def update_branch(branch_id: UUID, request: BranchRequest, service: BranchService = Depends(get_branch_service)):
    command = BranchUpdate(id=branch_id, name=request.name, is_active=request.is_active)
    return success(service.update_branch(command), message="Branch updated successfully")


@router.delete("/{branch_id}")
def delete_branch(branch_id: UUID, service: BranchService = Depends(get_branch_service)):
    service.delete_branch(branch_id)
    return success(message="Branch deleted successfully")
