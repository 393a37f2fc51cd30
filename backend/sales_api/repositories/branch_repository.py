"""
Branch Repository - Data Access Layer for Branches

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from sales_api.domain.branch import Branch
from sales_api.domain.common import as_utc
from sales_api.models.branch import Branch as BranchModel
from sales_api.models.sale import Sale as SaleModel
from sales_api.repositories.base import LIKE_ESCAPE, paginate, contains


class BranchRepository:
    """
    Repository for Branch data access

    Stages changes on the session; the unit of work commits them.
    """

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _map_row_to_branch(row: BranchModel) -> Branch:
        return Branch(
            id=row.id,
            name=row.name,
            is_active=row.is_active,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at) if row.updated_at else None
        )

    def create(self, branch: Branch) -> Branch:
        self.session.add(BranchModel(
            id=branch.id,
            name=branch.name,
            is_active=branch.is_active,
            created_at=branch.created_at,
            updated_at=branch.updated_at
        ))
        return branch

    def get_by_id(self, branch_id: UUID) -> Optional[Branch]:
        """
        Find branch by ID

        Returns:
            Branch or None if not found
        """
        row = self.session.get(BranchModel, branch_id)
        if not row:
            return None
        return self._map_row_to_branch(row)

    def update(self, branch: Branch) -> Optional[Branch]:
        row = self.session.get(BranchModel, branch.id)
        if not row:
            return None

        row.name = branch.name
        row.is_active = branch.is_active
        row.updated_at = branch.updated_at
        return branch

    def delete(self, branch_id: UUID) -> bool:
        row = self.session.get(BranchModel, branch_id)
        if not row:
            return False
        self.session.delete(row)
        return True

    def has_sales(self, branch_id: UUID) -> bool:
        """True when any sale was registered at the branch"""
        return bool(self.session.scalar(
            select(exists().where(SaleModel.branch_id == branch_id))
        ))

    def get_paged(
        self,
        page: int,
        size: int,
        name: Optional[str] = None
    ) -> Tuple[List[Branch], int]:
        """
        Find branches, ordered by name

        Args:
            page: 1-based page number
            size: Page size
            name: Case-insensitive substring of the branch name

        Returns:
            Tuple of (list of branches, total count)
        """
        stmt = select(BranchModel)
        if name:
            stmt = stmt.where(BranchModel.name.ilike(contains(name), escape=LIKE_ESCAPE))
        stmt = stmt.order_by(BranchModel.name)

        rows, total = paginate(self.session, stmt, page, size)
        return [self._map_row_to_branch(row) for row in rows], total
