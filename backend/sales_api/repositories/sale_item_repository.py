"""
Sale Item Repository - read access to sale items

Items are written through SaleRepository.update as part of the Sale
aggregate; this repository serves item lookups and per-sale listings.

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from sales_api.domain.sale import SaleItem
from sales_api.models.sale import SaleItem as SaleItemModel
from sales_api.repositories.base import paginate
from sales_api.repositories.sale_repository import SaleRepository


class SaleItemRepository:
    """Repository for SaleItem lookups"""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id_and_sale_id(self, item_id: UUID, sale_id: UUID) -> Optional[SaleItem]:
        """
        Find an item only if it belongs to the given sale

        Returns:
            SaleItem or None if not found
        """
        row = self.session.scalars(
            select(SaleItemModel).where(
                SaleItemModel.id == item_id,
                SaleItemModel.sale_id == sale_id
            )
        ).first()
        if not row:
            return None
        return SaleRepository._map_row_to_sale_item(row)

    def get_paged_by_sale_id(self, sale_id: UUID, page: int, size: int) -> Tuple[List[SaleItem], int]:
        """
        Items of one sale, oldest first

        Returns:
            Tuple of (list of items, total count)
        """
        stmt = (
            select(SaleItemModel)
            .where(SaleItemModel.sale_id == sale_id)
            .order_by(SaleItemModel.created_at)
        )

        rows, total = paginate(self.session, stmt, page, size)
        return [SaleRepository._map_row_to_sale_item(row) for row in rows], total
