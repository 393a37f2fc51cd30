"""
Modelo de sucursales
"""
from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from sales_api.core.database import Base


class Branch(Base):
    """
    Sucursales donde se registran ventas
    """
    __tablename__ = "branches"

    id = Column(Uuid, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))

    # Relationships
    sales = relationship("Sale", back_populates="branch", passive_deletes="all")
