"""
Users API Endpoints
Registration, lookup and removal. Password hashes are never returned.

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends, status
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

from sales_api.api.dependencies import get_user_service
from sales_api.api.responses import success
from sales_api.domain.user import UserCreate, UserRole, UserStatus
from sales_api.services.user_service import UserService

router = APIRouter()


# Request models
class UserRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = UserRole.CUSTOMER
    status: Optional[UserStatus] = UserStatus.ACTIVE


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_user(request: UserRequest, service: UserService = Depends(get_user_service)):
    command = UserCreate(
        username=request.username,
        email=request.email,
        phone=request.phone,
        password=request.password,
        role=request.role,
        status=request.status
    )
    return success(service.create_user(command), message="User created successfully")


@router.get("/{user_id}")
def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return success(service.get_user(user_id))


@router.delete("/{user_id}")
def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    service.delete_user(user_id)
    return success(message="User deleted successfully")
