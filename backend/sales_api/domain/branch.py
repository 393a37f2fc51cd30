"""
Branch Domain Model

Represents a store branch where sales are registered.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from uuid import UUID, uuid4

from sales_api.domain.common import utc_now


class Branch(BaseModel):
    """
    Branch domain model

    Fields:
        id: Branch ID (generated on creation)
        name: Branch name
        is_active: Whether the branch accepts sales
        created_at: When branch was created
        updated_at: When branch was last updated
    """

    id: UUID = Field(default_factory=uuid4, description="Branch ID")
    name: str = Field(..., description="Branch name")
    is_active: bool = Field(True, description="Whether branch is active")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def update_info(self, name: str, is_active: bool) -> None:
        self.name = name
        self.is_active = is_active
        self.updated_at = utc_now()


class BranchCreate(BaseModel):
    """Schema for creating a new branch"""
    name: Optional[str] = None
    is_active: bool = True


class BranchUpdate(BaseModel):
    """Schema for updating an existing branch"""
    id: Optional[UUID] = None
    name: Optional[str] = None
    is_active: bool = True
