"""
Branch validators
"""
from typing import List

from sales_api.domain.branch import BranchCreate, BranchUpdate
from sales_api.validators.base import ValidationFailure, check_required_text, check_required_id


def _check_branch_name(errors: List[ValidationFailure], name) -> None:
    check_required_text(errors, "name", name, "Branch name", 2, 100)


def validate_create_branch(command: BranchCreate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    _check_branch_name(errors, command.name)
    return errors


def validate_update_branch(command: BranchUpdate) -> List[ValidationFailure]:
    errors: List[ValidationFailure] = []
    check_required_id(errors, "id", command.id, "Branch ID")
    _check_branch_name(errors, command.name)
    return errors
