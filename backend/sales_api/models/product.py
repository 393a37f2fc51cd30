"""
Modelo de productos
"""
from sqlalchemy import Column, String, Boolean, DateTime, DECIMAL, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from sales_api.core.database import Base


class Product(Base):
    """
    Catálogo de productos
    """
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(String(500))
    price = Column(DECIMAL(12, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))

    # Relationships
    sale_items = relationship("SaleItem", back_populates="product", passive_deletes="all")
