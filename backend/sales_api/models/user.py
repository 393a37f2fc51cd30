"""
Modelo de usuarios
"""
from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func

from sales_api.core.database import Base


class User(Base):
    """
    Usuarios de la plataforma - password guarda solo el hash
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    username = Column(String(50), nullable=False)
    email = Column(String(100), nullable=False, unique=True, index=True)
    phone = Column(String(20))
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="Customer")
    status = Column(String(20), nullable=False, default="Active")

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))
