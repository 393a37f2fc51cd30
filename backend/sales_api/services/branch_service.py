"""
Branch Service
Create, read, list, update and delete branches

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional
from uuid import UUID

from sales_api.core.errors import ConflictError, NotFoundError
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.branch import BranchCreate, BranchUpdate
from sales_api.repositories.branch_repository import BranchRepository
from sales_api.services.base import BaseService
from sales_api.services.mappers import branch_from_create, branch_to_result
from sales_api.services.results import BranchResult, PagedResult, build_page
from sales_api.validators import (
    ensure_valid,
    validate_id,
    validate_page_request,
    validate_create_branch,
    validate_update_branch,
)

logger = logging.getLogger(__name__)


class BranchService(BaseService):

    def __init__(self, branches: BranchRepository, unit_of_work: UnitOfWork):
        super().__init__(unit_of_work)
        self.branches = branches

    def create_branch(self, command: BranchCreate) -> BranchResult:
        logger.info(f"Creating branch: {command.name}")
        ensure_valid(validate_create_branch(command))

        branch = self.branches.create(branch_from_create(command))
        self._commit("branch creation")

        logger.info(f"Branch created: {branch.id} ({branch.name})")
        return branch_to_result(branch)

    def get_branch(self, branch_id: UUID) -> BranchResult:
        ensure_valid(validate_id(branch_id, "Branch ID"))

        branch = self.branches.get_by_id(branch_id)
        if branch is None:
            raise NotFoundError("Branch", branch_id)
        return branch_to_result(branch)

    def list_branches(self, page: int, size: int, name: Optional[str] = None) -> PagedResult[BranchResult]:
        ensure_valid(validate_page_request(page, size, name=name))

        branches, total = self.branches.get_paged(page, size, name=name)
        return build_page([branch_to_result(b) for b in branches], total, page, size)

    def update_branch(self, command: BranchUpdate) -> BranchResult:
        logger.info(f"Updating branch: {command.id}")
        ensure_valid(validate_update_branch(command))

        branch = self.branches.get_by_id(command.id)
        if branch is None:
            logger.warning(f"Branch not found for update: {command.id}")
            raise NotFoundError("Branch", command.id)

        branch.update_info(command.name, command.is_active)
        self.branches.update(branch)
        self._commit("branch update")

        logger.info(f"Branch updated: {branch.id}")
        return branch_to_result(branch)

    def delete_branch(self, branch_id: UUID) -> None:
        logger.info(f"Deleting branch: {branch_id}")
        ensure_valid(validate_id(branch_id, "Branch ID"))

        if self.branches.get_by_id(branch_id) is None:
            logger.warning(f"Branch not found for deletion: {branch_id}")
            raise NotFoundError("Branch", branch_id)

        if self.branches.has_sales(branch_id):
            logger.warning(f"Branch {branch_id} has sales, refusing deletion")
            raise ConflictError(f"Branch with ID {branch_id} has sales and cannot be deleted")

        self.branches.delete(branch_id)
        self._commit("branch deletion")
        logger.info(f"Branch deleted: {branch_id}")
