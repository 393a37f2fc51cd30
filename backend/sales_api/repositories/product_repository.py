"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from sales_api.domain.common import as_utc
from sales_api.domain.product import Product
from sales_api.models.product import Product as ProductModel
from sales_api.models.sale import SaleItem as SaleItemModel
from sales_api.repositories.base import LIKE_ESCAPE, paginate, contains


class ProductRepository:
    """
    Repository for Product data access

    All queries for products are centralized here.
    Returns Product domain models, not ORM rows.
    """

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _map_row_to_product(row: ProductModel) -> Product:
        """Helper method to map an ORM row to the Product domain model"""
        return Product(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            is_active=row.is_active,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at) if row.updated_at else None
        )

    def create(self, product: Product) -> Product:
        self.session.add(ProductModel(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            is_active=product.is_active,
            created_at=product.created_at,
            updated_at=product.updated_at
        ))
        return product

    def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: Product ID

        Returns:
            Product or None if not found
        """
        row = self.session.get(ProductModel, product_id)
        if not row:
            return None
        return self._map_row_to_product(row)

    def update(self, product: Product) -> Optional[Product]:
        row = self.session.get(ProductModel, product.id)
        if not row:
            return None

        row.name = product.name
        row.description = product.description
        row.price = product.price
        row.is_active = product.is_active
        row.updated_at = product.updated_at
        return product

    def delete(self, product_id: UUID) -> bool:
        row = self.session.get(ProductModel, product_id)
        if not row:
            return False
        self.session.delete(row)
        return True

    def has_sale_items(self, product_id: UUID) -> bool:
        """True when the product appears on any sale item"""
        return bool(self.session.scalar(
            select(exists().where(SaleItemModel.product_id == product_id))
        ))

    def get_paged(
        self,
        page: int,
        size: int,
        search: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> Tuple[List[Product], int]:
        """
        Find products with filters

        Args:
            page: 1-based page number
            size: Page size
            search: Search in name
            is_active: Filter by active status

        Returns:
            Tuple of (list of products, total count)
        """
        stmt = select(ProductModel)
        if search:
            stmt = stmt.where(ProductModel.name.ilike(contains(search), escape=LIKE_ESCAPE))
        if is_active is not None:
            stmt = stmt.where(ProductModel.is_active == is_active)
        stmt = stmt.order_by(ProductModel.name)

        rows, total = paginate(self.session, stmt, page, size)
        return [self._map_row_to_product(row) for row in rows], total
