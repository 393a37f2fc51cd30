"""
Password hashing
"""
from typing import List, Optional

from passlib.context import CryptContext

from .config import settings


class PasswordHasher:
    """Hashes and verifies user passwords with passlib"""

    def __init__(self, schemes: Optional[List[str]] = None):
        self._context = CryptContext(
            schemes=schemes or settings.get_password_schemes(),
            deprecated="auto",
        )

    def hash_password(self, password: str) -> str:
        return self._context.hash(password)

    def verify_password(self, password: str, hashed: str) -> bool:
        return self._context.verify(password, hashed)


# Password hashing context (bcrypt unless configured otherwise)
password_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """FastAPI dependency for the shared hasher"""
    return password_hasher
