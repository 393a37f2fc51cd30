"""
Customer Domain Model

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID, uuid4

from sales_api.domain.common import utc_now


class Customer(BaseModel):
    """
    Customer domain model - the buyer on a sale

    Email is optional but unique when present.
    """

    id: UUID = Field(default_factory=uuid4, description="Customer ID")
    name: str = Field(..., description="Customer name")
    email: Optional[str] = Field(None, description="Customer email (unique)")
    phone: Optional[str] = Field(None, description="Customer phone (E.164)")
    is_active: bool = Field(True, description="Whether customer is active")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def update_info(self, name: str, email: Optional[str], phone: Optional[str], is_active: bool) -> None:
        self.name = name
        self.email = email
        self.phone = phone
        self.is_active = is_active
        self.updated_at = utc_now()


class CustomerCreate(BaseModel):
    """Schema for creating a new customer"""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True


class CustomerUpdate(BaseModel):
    """Schema for updating an existing customer"""
    id: Optional[UUID] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True
