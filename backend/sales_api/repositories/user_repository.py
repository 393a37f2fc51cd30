"""
User Repository - Data Access Layer for Users

Author: TM3
Date: 2025-10-17
"""
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from sales_api.domain.common import as_utc
from sales_api.domain.user import User, UserRole, UserStatus
from sales_api.models.user import User as UserModel


class UserRepository:
    """Repository for User data access"""

    def __init__(self, session: Session):
        self.session = session

    @staticmethod
    def _map_row_to_user(row: UserModel) -> User:
        return User(
            id=row.id,
            username=row.username,
            email=row.email,
            phone=row.phone,
            password=row.password,
            role=UserRole(row.role),
            status=UserStatus(row.status),
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at) if row.updated_at else None
        )

    def create(self, user: User) -> User:
        self.session.add(UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            phone=user.phone,
            password=user.password,
            role=user.role.value,
            status=user.status.value,
            created_at=user.created_at,
            updated_at=user.updated_at
        ))
        return user

    def get_by_id(self, user_id: UUID) -> Optional[User]:
        row = self.session.get(UserModel, user_id)
        if not row:
            return None
        return self._map_row_to_user(row)

    def get_by_email(self, email: str) -> Optional[User]:
        row = self.session.scalars(
            select(UserModel).where(func.lower(UserModel.email) == email.lower())
        ).first()
        if not row:
            return None
        return self._map_row_to_user(row)

    def delete(self, user_id: UUID) -> bool:
        row = self.session.get(UserModel, user_id)
        if not row:
            return False
        self.session.delete(row)
        return True
