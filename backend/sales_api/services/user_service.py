"""
User Service
User registration, lookup and removal

Author: TM3
Date: 2025-10-17
"""
import logging
from uuid import UUID

from sales_api.core.errors import ConflictError, NotFoundError
from sales_api.core.security import PasswordHasher
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.domain.user import UserCreate
from sales_api.repositories.user_repository import UserRepository
from sales_api.services.base import BaseService
from sales_api.services.mappers import user_from_create, user_to_result
from sales_api.services.results import UserResult
from sales_api.validators import ensure_valid, validate_id, validate_create_user

logger = logging.getLogger(__name__)


class UserService(BaseService):

    def __init__(self, users: UserRepository, unit_of_work: UnitOfWork, password_hasher: PasswordHasher):
        super().__init__(unit_of_work)
        self.users = users
        self.password_hasher = password_hasher

    def create_user(self, command: UserCreate) -> UserResult:
        logger.info(f"Creating user: {command.username}")
        ensure_valid(validate_create_user(command))

        if self.users.get_by_email(command.email) is not None:
            logger.warning(f"User email already in use: {command.email}")
            raise ConflictError(f"User with email {command.email} already exists")

        # Only the hash is stored
        password_hash = self.password_hasher.hash_password(command.password)
        user = self.users.create(user_from_create(command, password_hash))
        self._commit("user creation")

        logger.info(f"User created: {user.id}")
        return user_to_result(user)

    def get_user(self, user_id: UUID) -> UserResult:
        ensure_valid(validate_id(user_id, "User ID"))

        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user_to_result(user)

    def delete_user(self, user_id: UUID) -> None:
        logger.info(f"Deleting user: {user_id}")
        ensure_valid(validate_id(user_id, "User ID"))

        if self.users.get_by_id(user_id) is None:
            logger.warning(f"User not found for deletion: {user_id}")
            raise NotFoundError("User", user_id)

        self.users.delete(user_id)
        self._commit("user deletion")
        logger.info(f"User deleted: {user_id}")
