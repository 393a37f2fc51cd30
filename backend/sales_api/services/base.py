"""
Shared plumbing for services

Every mutating operation ends the same way: commit through the unit of
work, escalate a failed commit, then publish events best-effort.
"""
import logging
from typing import Any, Optional

from sales_api.core.errors import TransactionError
from sales_api.core.unit_of_work import UnitOfWork
from sales_api.events.publisher import MessagePublisher

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the unit of work (and publisher, when the aggregate emits events)"""

    def __init__(self, unit_of_work: UnitOfWork, publisher: Optional[MessagePublisher] = None):
        self.unit_of_work = unit_of_work
        self.publisher = publisher

    def _commit(self, action: str) -> None:
        """
        Commit or raise TransactionError

        Args:
            action: What was being committed, e.g. "branch creation"
        """
        if not self.unit_of_work.commit():
            raise TransactionError(
                f"Failed to commit {action} transaction",
                cause=self.unit_of_work.last_error
            )

    def _publish(self, topic: str, message: Any) -> None:
        """
        Publish after a successful commit

        The change is already durable, so a publishing failure is logged
        and does not fail the operation.
        """
        if self.publisher is None:
            return
        try:
            self.publisher.publish(topic, message)
        except Exception as e:
            logger.error(f"Failed to publish message to topic '{topic}': {e}")
