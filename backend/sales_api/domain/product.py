"""
Product Domain Model

Represents a product in the sales catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sales_api.domain.common import utc_now


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Product ID (generated on creation)
        name: Product name
        description: Product description (optional)
        price: Unit selling price, used as the unit price of new sale items
        is_active: Whether product can be sold
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: UUID = Field(default_factory=uuid4, description="Product ID")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., description="Unit price")
    is_active: bool = Field(True, description="Whether product is active")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def can_be_sold(self) -> bool:
        """Only active products can be added to a sale"""
        return self.is_active

    def update_info(self, name: str, description: Optional[str], price: Decimal, is_active: bool) -> None:
        self.name = name
        self.description = description
        self.price = price
        self.is_active = is_active
        self.updated_at = utc_now()


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    is_active: bool = True


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    id: Optional[UUID] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    is_active: bool = True
