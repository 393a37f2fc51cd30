"""
Modelo de clientes
"""
from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from sales_api.core.database import Base


class Customer(Base):
    """
    Clientes - email único cuando está presente
    """
    __tablename__ = "customers"

    id = Column(Uuid, primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(100), unique=True, index=True)
    phone = Column(String(20))
    is_active = Column(Boolean, nullable=False, default=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))

    # Relationships
    sales = relationship("Sale", back_populates="customer", passive_deletes="all")
