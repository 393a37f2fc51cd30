"""
Modelos relacionados con ventas
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, DECIMAL, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from sales_api.core.database import Base


class Sale(Base):
    """
    Tabla principal de ventas - aggregate root de sus items
    """
    __tablename__ = "sales"

    id = Column(Uuid, primary_key=True)

    # Identificación
    sale_number = Column(String(50), nullable=False, unique=True, index=True)
    sale_date = Column(DateTime(timezone=True), nullable=False, index=True)

    # Relaciones
    customer_id = Column(Uuid, ForeignKey("customers.id"), nullable=False, index=True)
    branch_id = Column(Uuid, ForeignKey("branches.id"), nullable=False, index=True)

    # Montos
    total_amount = Column(DECIMAL(12, 2), nullable=False, default=0)

    # Estados
    status = Column(String(20), nullable=False, default="Pending", index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True))

    # Relationships
    customer = relationship("Customer", back_populates="sales")
    branch = relationship("Branch", back_populates="sales")
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.created_at",
    )


class SaleItem(Base):
    """
    Items/productos de cada venta
    """
    __tablename__ = "sale_items"

    id = Column(Uuid, primary_key=True)
    sale_id = Column(Uuid, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey("products.id"), nullable=False, index=True)

    # Cantidades y montos
    quantity = Column(Integer, nullable=False)
    unit_price = Column(DECIMAL(12, 2), nullable=False)
    discount = Column(DECIMAL(5, 2), nullable=False, default=0)
    total_amount = Column(DECIMAL(12, 2), nullable=False)

    is_cancelled = Column(Boolean, nullable=False, default=False)

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))

    # Relationships
    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", back_populates="sale_items")
