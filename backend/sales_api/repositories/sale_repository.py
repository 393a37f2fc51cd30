"""
Sale Repository - Data Access Layer for Sales

Sales are always read and written together with their items.

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from sales_api.domain.common import as_utc
from sales_api.domain.sale import Sale, SaleItem, SaleStatus
from sales_api.models.sale import Sale as SaleModel, SaleItem as SaleItemModel
from sales_api.repositories.base import LIKE_ESCAPE, paginate, contains


class SaleRepository:
    """Repository for the Sale aggregate"""

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _map_row_to_sale_item(row: SaleItemModel) -> SaleItem:
        return SaleItem(
            id=row.id,
            sale_id=row.sale_id,
            product_id=row.product_id,
            quantity=row.quantity,
            unit_price=row.unit_price,
            discount=row.discount,
            total_amount=row.total_amount,
            is_cancelled=row.is_cancelled,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at) if row.updated_at else None
        )

    @classmethod
    def _map_row_to_sale(cls, row: SaleModel) -> Sale:
        return Sale(
            id=row.id,
            sale_number=row.sale_number,
            sale_date=as_utc(row.sale_date),
            customer_id=row.customer_id,
            branch_id=row.branch_id,
            status=SaleStatus(row.status),
            total_amount=row.total_amount,
            items=[cls._map_row_to_sale_item(item) for item in row.items],
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at) if row.updated_at else None
        )

    @staticmethod
    def _new_item_row(item: SaleItem) -> SaleItemModel:
        return SaleItemModel(
            id=item.id,
            sale_id=item.sale_id,
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
            discount=item.discount,
            total_amount=item.total_amount,
            is_cancelled=item.is_cancelled,
            created_at=item.created_at,
            updated_at=item.updated_at
        )

    @staticmethod
    def _copy_item(item: SaleItem, row: SaleItemModel) -> None:
        row.product_id = item.product_id
        row.quantity = item.quantity
        row.unit_price = item.unit_price
        row.discount = item.discount
        row.total_amount = item.total_amount
        row.is_cancelled = item.is_cancelled
        row.updated_at = item.updated_at

    def _get_row(self, sale_id: UUID) -> Optional[SaleModel]:
        return self.session.scalars(
            select(SaleModel)
            .options(selectinload(SaleModel.items))
            .where(SaleModel.id == sale_id)
        ).first()

    def create(self, sale: Sale) -> Sale:
        self.session.add(SaleModel(
            id=sale.id,
            sale_number=sale.sale_number,
            sale_date=sale.sale_date,
            customer_id=sale.customer_id,
            branch_id=sale.branch_id,
            status=sale.status.value,
            total_amount=sale.total_amount,
            created_at=sale.created_at,
            updated_at=sale.updated_at,
            items=[self._new_item_row(item) for item in sale.items]
        ))
        return sale

    def get_by_id(self, sale_id: UUID) -> Optional[Sale]:
        """
        Find sale by ID, items included

        Returns:
            Sale or None if not found
        """
        row = self._get_row(sale_id)
        if not row:
            return None
        return self._map_row_to_sale(row)

    def get_by_sale_number(self, sale_number: str) -> Optional[Sale]:
        row = self.session.scalars(
            select(SaleModel)
            .options(selectinload(SaleModel.items))
            .where(SaleModel.sale_number == sale_number)
        ).first()
        if not row:
            return None
        return self._map_row_to_sale(row)

    def update(self, sale: Sale) -> Optional[Sale]:
        """
        Write the aggregate back, synchronising the item rows

        New items are inserted, known items updated and items no longer
        on the sale deleted (delete-orphan cascade).
        """
        row = self._get_row(sale.id)
        if not row:
            return None

        row.sale_number = sale.sale_number
        row.sale_date = sale.sale_date
        row.customer_id = sale.customer_id
        row.branch_id = sale.branch_id
        row.status = sale.status.value
        row.total_amount = sale.total_amount
        row.updated_at = sale.updated_at

        rows_by_id = {item_row.id: item_row for item_row in row.items}
        kept_ids = set()
        for item in sale.items:
            item_row = rows_by_id.get(item.id)
            if item_row is None:
                row.items.append(self._new_item_row(item))
            else:
                self._copy_item(item, item_row)
            kept_ids.add(item.id)

        for item_row in list(row.items):
            if item_row.id not in kept_ids:
                row.items.remove(item_row)

        return sale

    def delete(self, sale_id: UUID) -> bool:
        row = self._get_row(sale_id)
        if not row:
            return False
        self.session.delete(row)
        return True

    def get_paged(
        self,
        page: int,
        size: int,
        sale_number: Optional[str] = None,
        customer_id: Optional[UUID] = None,
        branch_id: Optional[UUID] = None,
        status: Optional[SaleStatus] = None
    ) -> Tuple[List[Sale], int]:
        """
        Find sales with filters, newest first

        Args:
            page: 1-based page number
            size: Page size
            sale_number: Substring of the sale number
            customer_id: Filter by customer
            branch_id: Filter by branch
            status: Filter by status

        Returns:
            Tuple of (list of sales, total count)
        """
        stmt = select(SaleModel).options(selectinload(SaleModel.items))
        if sale_number:
            stmt = stmt.where(SaleModel.sale_number.ilike(contains(sale_number), escape=LIKE_ESCAPE))
        if customer_id:
            stmt = stmt.where(SaleModel.customer_id == customer_id)
        if branch_id:
            stmt = stmt.where(SaleModel.branch_id == branch_id)
        if status:
            stmt = stmt.where(SaleModel.status == status.value)
        stmt = stmt.order_by(SaleModel.created_at.desc())

        rows, total = paginate(self.session, stmt, page, size)
        return [self._map_row_to_sale(row) for row in rows], total
