"""
Application errors

Every failure a service can report is one of these classes. The API
layer maps each class to a status code (see sales_api.main).

Author: TM3
Date: 2025-10-17
"""
from typing import List, Optional, Tuple


class ApplicationError(Exception):
    """Base class for errors reported by services"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApplicationError):
    """
    Input failed validation

    Carries every (field, message) pair produced by the validator,
    never just the first one.
    """

    def __init__(self, errors: List[Tuple[str, str]], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = list(errors)

    def to_list(self) -> List[dict]:
        return [{"field": field, "message": msg} for field, msg in self.errors]

    def __str__(self) -> str:
        details = "; ".join(f"{field}: {msg}" for field, msg in self.errors)
        return f"{self.message}: {details}" if details else self.message


class NotFoundError(ApplicationError):
    """Target entity does not exist"""

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(ApplicationError):
    """A unique key is already taken (email, sale number)"""
    pass


class BusinessRuleError(ApplicationError):
    """Operation is not allowed in the current state of the aggregate"""
    pass


class TransactionError(ApplicationError):
    """
    Unit of work failed to commit

    The underlying exception is kept in `cause` so it can be logged or
    inspected; callers that only care whether anything was persisted
    can ignore it.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
