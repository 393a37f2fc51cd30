"""
Unit of Work - transaction boundary for one request

Repositories only stage changes on the session; nothing is durable
until commit() succeeds.

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Commits the pending changes of a request-scoped session

    commit() never raises on a database failure: it rolls back, keeps the
    exception in `last_error` and returns False. Services turn False into
    a TransactionError carrying `last_error` as its cause.
    """

    def __init__(self, session: Session):
        self.session = session
        self.last_error: Optional[SQLAlchemyError] = None

    def commit(self) -> bool:
        """
        Commit pending changes

        Returns:
            True if everything was persisted, False otherwise
        """
        try:
            self.session.commit()
            self.last_error = None
            return True
        except SQLAlchemyError as e:
            logger.error(f"Commit failed, rolling back: {e}")
            self.last_error = e
            self.rollback()
            return False

    def rollback(self) -> None:
        """Discard pending changes"""
        self.session.rollback()
