"""
Customer Repository - Data Access Layer for Customers

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from sales_api.domain.common import as_utc
from sales_api.domain.customer import Customer
from sales_api.models.customer import Customer as CustomerModel
from sales_api.models.sale import Sale as SaleModel
from sales_api.repositories.base import LIKE_ESCAPE, paginate, contains


class CustomerRepository:
    """Repository for Customer data access"""

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _map_row_to_customer(row: CustomerModel) -> Customer:
        return Customer(
            id=row.id,
            name=row.name,
            email=row.email,
            phone=row.phone,
            is_active=row.is_active,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at) if row.updated_at else None
        )

    def create(self, customer: Customer) -> Customer:
        self.session.add(CustomerModel(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            is_active=customer.is_active,
            created_at=customer.created_at,
            updated_at=customer.updated_at
        ))
        return customer

    def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        row = self.session.get(CustomerModel, customer_id)
        if not row:
            return None
        return self._map_row_to_customer(row)

    def get_by_email(self, email: str) -> Optional[Customer]:
        """
        Find customer by email (exact, case-insensitive)

        Returns:
            Customer or None if not found
        """
        row = self.session.scalars(
            select(CustomerModel).where(func.lower(CustomerModel.email) == email.lower())
        ).first()
        if not row:
            return None
        return self._map_row_to_customer(row)

    def update(self, customer: Customer) -> Optional[Customer]:
        row = self.session.get(CustomerModel, customer.id)
        if not row:
            return None

        row.name = customer.name
        row.email = customer.email
        row.phone = customer.phone
        row.is_active = customer.is_active
        row.updated_at = customer.updated_at
        return customer

    def delete(self, customer_id: UUID) -> bool:
        row = self.session.get(CustomerModel, customer_id)
        if not row:
            return False
        self.session.delete(row)
        return True

    def has_sales(self, customer_id: UUID) -> bool:
        """True when any sale references the customer"""
        return bool(self.session.scalar(
            select(exists().where(SaleModel.customer_id == customer_id))
        ))

    def get_paged(
        self,
        page: int,
        size: int,
        name: Optional[str] = None,
        email: Optional[str] = None
    ) -> Tuple[List[Customer], int]:
        """
        Find customers with filters, ordered by name

        Returns:
            Tuple of (list of customers, total count)
        """
        stmt = select(CustomerModel)
        if name:
            stmt = stmt.where(CustomerModel.name.ilike(contains(name), escape=LIKE_ESCAPE))
        if email:
            stmt = stmt.where(CustomerModel.email.ilike(contains(email), escape=LIKE_ESCAPE))
        stmt = stmt.order_by(CustomerModel.name)

        rows, total = paginate(self.session, stmt, page, size)
        return [self._map_row_to_customer(row) for row in rows], total
