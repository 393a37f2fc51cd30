"""
User Domain Model

Author: TM3
Date: 2025-10-17
"""
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID, uuid4

from sales_api.domain.common import utc_now


class UserRole(str, Enum):
    CUSTOMER = "Customer"
    MANAGER = "Manager"
    ADMIN = "Admin"


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"


class User(BaseModel):
    """
    User domain model

    `password` always holds the hash, never the plaintext.
    """

    id: UUID = Field(default_factory=uuid4, description="User ID")
    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Login email (unique)")
    phone: Optional[str] = Field(None, description="Phone (E.164)")
    password: str = Field(..., description="Password hash")
    role: UserRole = Field(UserRole.CUSTOMER, description="User role")
    status: UserStatus = Field(UserStatus.ACTIVE, description="Account status")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE


class UserCreate(BaseModel):
    """Schema for creating a new user (plaintext password)"""
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Optional[UserRole] = UserRole.CUSTOMER
    status: Optional[UserStatus] = UserStatus.ACTIVE
